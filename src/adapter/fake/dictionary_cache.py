"""In-memory implementation of DictionaryCachePort for testing."""


class InMemoryDictionaryCache:
    def __init__(self, data: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(data or {})
        self.get_calls: list[str] = []
        self.set_calls: list[tuple[str, str]] = []

    async def get(self, key: str) -> str | None:
        self.get_calls.append(key)
        return self.data.get(key)

    async def set(self, key: str, value: str) -> None:
        self.set_calls.append((key, value))
        self.data[key] = value

    async def ping(self) -> bool:
        return True
