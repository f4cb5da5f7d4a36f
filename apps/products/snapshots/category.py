from dataclasses import dataclass


@dataclass(frozen=True)
class CategorySnapshot:
    """Product category; also the key of every capacity lane"""
    id: str
    name: str = ''
    order: int = 0
    enabled: bool = True

    def __str__(self):
        return self.name or self.id
