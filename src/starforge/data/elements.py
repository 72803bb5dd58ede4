"""Element table used for placeholder crust composition."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Element:
    symbol: str
    name: str
    atomic_mass: float
    is_volatile: bool = False


ELEMENT_DEFINITIONS: tuple[Element, ...] = (
    Element("H", "Hydrogen", 1.008, is_volatile=True),
    Element("He", "Helium", 4.0026, is_volatile=True),
    Element("C", "Carbon", 12.011, is_volatile=True),
    Element("N", "Nitrogen", 14.007, is_volatile=True),
    Element("O", "Oxygen", 15.999, is_volatile=True),
    Element("Na", "Sodium", 22.990),
    Element("Mg", "Magnesium", 24.305),
    Element("Al", "Aluminium", 26.982),
    Element("Si", "Silicon", 28.085),
    Element("P", "Phosphorus", 30.974),
    Element("S", "Sulfur", 32.06, is_volatile=True),
    Element("Cl", "Chlorine", 35.45, is_volatile=True),
    Element("Ar", "Argon", 39.948, is_volatile=True),
    Element("K", "Potassium", 39.098),
    Element("Ca", "Calcium", 40.078),
    Element("Ti", "Titanium", 47.867),
    Element("Cr", "Chromium", 51.996),
    Element("Mn", "Manganese", 54.938),
    Element("Fe", "Iron", 55.845),
    Element("Co", "Cobalt", 58.933),
    Element("Ni", "Nickel", 58.693),
    Element("Cu", "Copper", 63.546),
    Element("Zn", "Zinc", 65.38),
    Element("Ag", "Silver", 107.87),
    Element("Sn", "Tin", 118.71),
    Element("Pt", "Platinum", 195.08),
    Element("Au", "Gold", 196.97),
    Element("Pb", "Lead", 207.2),
    Element("U", "Uranium", 238.03),
)

ELEMENTS: dict[str, Element] = {element.symbol: element for element in ELEMENT_DEFINITIONS}


def element_name(symbol: str) -> str:
    """Full element name, or the symbol itself when it is not in the table."""
    element = ELEMENTS.get(symbol)
    return element.name if element is not None else symbol


__all__ = ["ELEMENTS", "ELEMENT_DEFINITIONS", "Element", "element_name"]
