"""DiffSync models and adapters for the IPAM to NAM security group SSoT."""
