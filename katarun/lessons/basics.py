"""Worked answers to the first lessons: variables, functions and conditions."""

from __future__ import annotations


def calculate_price_of_apples(quantity: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    if quantity > 40:
        return quantity
    return quantity * 2


def bigger(a: int, b: int) -> int:
    """Return the larger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """Map fizz to foo, fuzz to bar and "literally anything" to baz."""
    answers = {"fizz": "foo", "fuzz": "bar", "literally anything": "baz"}
    try:
        return answers[fizzish]
    except KeyError:
        raise ValueError("Unknown input") from None


def animal_habitat(animal: str) -> str:
    """Where an animal lives, or "Unknown"."""
    identifier = {"crab": 1, "gopher": 2, "snake": 3}.get(animal, 0)
    return {1: "Beach", 2: "Burrow", 3: "Desert"}.get(identifier, "Unknown")


def is_even(num: int) -> bool:
    """Whether ``num`` is even."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices lose 10, odd prices lose 3."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """Return ``num`` squared."""
    return num * num