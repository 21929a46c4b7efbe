from dataclasses import dataclass


@dataclass(frozen=True)
class Label:
    """
    Identifies a class of work and the execution capability it requires.
    Compared by name; supplied by the caller on every cycle.
    """
    name: str

    def __str__(self) -> str:
        return self.name
