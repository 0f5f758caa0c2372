from abc import ABC, abstractmethod
from .cache import DNSCache
from .command import DNSCacheGetCommand, DNSCacheDeleteCommand


class IDNSCacheRepository(ABC):
    @abstractmethod
    async def ensure_schema(self):
        pass

    @abstractmethod
    async def save(self, data: DNSCache):
        pass

    @abstractmethod
    async def get(self, command: DNSCacheGetCommand) -> list[DNSCache]:
        pass

    @abstractmethod
    async def delete(self, command: DNSCacheDeleteCommand):
        pass
