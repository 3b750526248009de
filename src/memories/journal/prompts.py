"""Fixed sets of mood emoji and encouraging copy, keyed by rating."""

from __future__ import annotations

import random

MOOD_EMOJI: dict[int, str] = {
    1: "😡",
    2: "😐",
    3: "😊",
    4: "😄",
    5: "😍",
}

# Shown once the nutshell hits the length cap
ENCOURAGING_MESSAGES: dict[int, str] = {
    1: "Want to spill more tea? Let it all out below! ☕🔥",
    2: "It's okay to vent. Share more below if you want. 💙",
    3: "Feeling meh? You can add more details below. 🤔",
    4: "Ooh, sounds nice! Share the best part below! 🌟",
    5: "This sounds amazing! Tell me all about it! 🎉",
}

MOTIVATIONAL_MESSAGES: dict[int, list[str]] = {
    1: [
        "Tough days happen, and you're doing your best. Tomorrow is a fresh start! 🌱",
        "Sending virtual hugs! Things will get better. 💙",
    ],
    2: [
        "Life has its ups and downs. Keep going, you're doing great! 🌼",
        "Even small wins count! Keep shining! ✨",
    ],
    3: [
        "Another day, another memory. Keep writing your story! 📖",
        "Your thoughts matter. Thanks for sharing! 💬",
    ],
    4: [
        "Yay! Cherish today’s happy moments. 😊",
        "Another beautiful day in your journal! Keep the good vibes coming! 🌞",
    ],
    5: [
        "Woohoo! Today was fantastic! Keep spreading the joy! 🎉",
        "Another golden moment saved! May tomorrow be just as great! 💖",
    ],
}

DEFAULT_EMOJI = "⭐️"
DEFAULT_ENCOURAGEMENT = "That's all you can type here! Tell me more below. 😊"
DEFAULT_MOTIVATION = "Your memory has been saved. 💖"


def mood_emoji(rating: int) -> str:
    return MOOD_EMOJI.get(rating, DEFAULT_EMOJI)


def encouraging_message(rating: int) -> str:
    return ENCOURAGING_MESSAGES.get(rating, DEFAULT_ENCOURAGEMENT)


def motivational_message(rating: int, rng: random.Random | None = None) -> str:
    """Pick one of the messages for *rating* at random."""
    choices = MOTIVATIONAL_MESSAGES.get(rating)
    if not choices:
        return DEFAULT_MOTIVATION
    return (rng or random).choice(choices)
