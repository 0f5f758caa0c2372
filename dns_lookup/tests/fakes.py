from domain.models.dns.resolver import DomainRecord, IDomainResolver


class FakeResolver(IDomainResolver):
    def __init__(self, results: dict[str, list[DomainRecord] | None] | None = None):
        self.results = results or {}
        self.calls: list[str] = []

    async def lookup(self, domain: str) -> list[DomainRecord] | None:
        self.calls.append(domain)
        return self.results.get(domain)


EXAMPLE_RECORDS = [
    {
        "host": "example.com",
        "class": "IN",
        "ttl": 300,
        "type": "A",
        "ip": "93.184.216.34",
    },
    {
        "host": "example.com",
        "class": "IN",
        "ttl": 300,
        "type": "NS",
        "target": "a.iana-servers.net",
    },
    {
        "host": "www.example.com",
        "class": "IN",
        "ttl": 300,
        "type": "A",
        "ip": "93.184.216.34",
    },
]
