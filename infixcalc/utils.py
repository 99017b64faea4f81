import enum


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__

    @property
    def label(self) -> str:
        """DIVISION_BY_ZERO -> 'Division by zero'"""
        return self.name.replace("_", " ").capitalize()
