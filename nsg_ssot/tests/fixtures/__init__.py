"""NetBox and NAM API payload fixtures."""

IPAM_HOST = "netbox.example.com"
NAM_HOST = "nam.example.com"

CUSTOM_FIELDS = [
    {"id": 1, "name": "domain", "type": "select", "choice_set": {"id": 10, "name": "Domains"}},
    {"id": 2, "name": "env", "type": "select", "choice_set": {"id": 20, "name": "Environments"}},
    {"id": 3, "name": "owner", "type": "text", "choice_set": None},
]

CHOICE_SETS = {
    10: {"id": 10, "name": "Domains", "extra_choices": [["na", "N/A"], ["acme", "Acme"]]},
    20: {
        "id": 20,
        "name": "Environments",
        "extra_choices": [["na", "N/A"], ["prod", "Production"], ["test", "Test"]],
    },
}


def make_prefix(cidr, vrf="nhc", status="active", domain=None, env=None):  # pylint: disable=too-many-arguments
    """Build a NetBox prefix as returned with related objects expanded."""
    return {
        "prefix": cidr,
        "vrf": {"id": 1, "name": vrf} if isinstance(vrf, str) else vrf,
        "status": {"value": status, "label": status.title()} if isinstance(status, str) else status,
        "custom_fields": {"domain": domain, "env": env},
    }


PREFIXES = [
    make_prefix("10.0.0.0/24", domain="acme", env="prod"),
    make_prefix("10.0.8.0/21", status="container", domain="acme", env="prod"),
    make_prefix("10.9.0.0/24", vrf="global", domain="acme", env="prod"),
    make_prefix("10.10.0.0/24", vrf=None, domain="acme", env="test"),
    make_prefix("10.20.0.0/24", vrf=7, domain="acme", env="test"),
    make_prefix("10.30.0.0/24", env="test"),
]


def make_security_group(_id, name, ips, scope="consumer", tag=None):  # pylint: disable=too-many-arguments
    """Build a NAM NSX security group."""
    return {
        "_id": _id,
        "name": name,
        "desc": "Managed by NAM",
        "scope": scope,
        "tag": tag or name.split("-", 2)[-1],
        "ipAddresses": [{"ip": ip} for ip in ips],
    }
