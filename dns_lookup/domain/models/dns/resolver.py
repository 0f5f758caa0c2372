from abc import ABC, abstractmethod

DomainRecord = dict[str, str | int]


class IDomainResolver(ABC):
    @abstractmethod
    async def lookup(self, domain: str) -> list[DomainRecord] | None:
        pass
