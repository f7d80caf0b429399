"""Closing messages shown after a component is created."""

AFFIRMATIONS: list[str] = [
    "You're a rockstar!",
    "Nice work, keep it up!",
    "Another one for the collection.",
    "That component looks great already.",
    "Ship it!",
    "Your future self says thanks.",
    "Clean and ready to go.",
    "One less file to write by hand.",
    "Go build something wonderful.",
    "You make this look easy.",
]
