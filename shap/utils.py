import enum


class SymbolEnum(enum.Enum):
    """Enum whose values are the source lexemes of its members."""

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return self.name

    @classmethod
    def lookup(cls, lexeme: str):
        try:
            return cls(lexeme)
        except ValueError:
            return None
