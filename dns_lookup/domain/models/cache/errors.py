class CacheStoreError(Exception):
    pass


class DuplicateCacheEntryError(CacheStoreError):
    def __init__(self, domain: str):
        super().__init__(f"cache entry already exists, {domain}")
        self.domain = domain


class CacheIntegrityError(CacheStoreError):
    pass
