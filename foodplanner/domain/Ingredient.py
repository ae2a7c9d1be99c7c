"""Ingredient domain entity: name, optional quantity, optional unit."""
from typing import Optional


class Ingredient:
    def __init__(self, name: str = "", quantity: Optional[float] = None, unit: Optional[str] = None):
        # None means "not declared"; a declared 0 stays 0
        self.name = name
        self.quantity = quantity
        self.unit = unit

    @property
    def has_quantity(self) -> bool:
        return self.quantity is not None

    def _key(self):
        return (self.name, self.quantity, self.unit)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ingredient):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        if self.quantity is None:
            return self.name
        return f"{self.name} - {self.quantity:g} {self.unit or ''}".rstrip()

    def __repr__(self) -> str:
        return f"Ingredient(name={self.name!r}, quantity={self.quantity!r}, unit={self.unit!r})"

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        quantity = d.get("quantity")
        if quantity is not None:
            quantity = float(quantity)
        unit = d.get("unit")
        return Ingredient(name=str(d.get("name", "")), quantity=quantity,
                          unit=str(unit) if unit is not None else None)

    def to_dict(self):
        '''Converts the Ingredient to a dictionary for JSON persistence (absent fields omitted).'''
        data = {"name": self.name}
        if self.quantity is not None:
            data["quantity"] = self.quantity
        if self.unit is not None:
            data["unit"] = self.unit
        return data
