from pydantic import BaseModel


class DNSCacheGetCommand(BaseModel):
    domain: str | None = None


class DNSCacheDeleteCommand(BaseModel):
    domain: str
