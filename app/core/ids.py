import uuid

PROVIDER_PREFIX = "prv"
RESOURCE_PREFIX = "res"
LISTING_PREFIX = "lst"
APPLICATION_PREFIX = "app"


def gen_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex}"
