# SPDX-License-Identifier: MIT

from typing import TypedDict


class Quote(TypedDict):
    text: str
    author: str


QUOTES: tuple[Quote, ...] = (
    {
        "text": "Time is what we want most, but what we use worst.",
        "author": "William Penn",
    },
    {
        "text": "The bad news is time flies. The good news is you're the pilot.",
        "author": "Michael Altshuler",
    },
    {
        "text": "Lost time is never found again.",
        "author": "Benjamin Franklin",
    },
    {
        "text": "While we are postponing, life speeds by.",
        "author": "Seneca",
    },
    {
        "text": "It is not that we have a short time to live, but that we waste a lot of it.",
        "author": "Seneca",
    },
    {
        "text": "Do not dwell in the past, do not dream of the future, concentrate the mind on the present moment.",
        "author": "Buddha",
    },
    {
        "text": "The two most powerful warriors are patience and time.",
        "author": "Leo Tolstoy",
    },
    {
        "text": "Nature does not hurry, yet everything is accomplished.",
        "author": "Lao Tzu",
    },
    {
        "text": "Time you enjoy wasting is not wasted time.",
        "author": "Marthe Troly-Curtin",
    },
    {
        "text": "How we spend our days is, of course, how we spend our lives.",
        "author": "Annie Dillard",
    },
    {
        "text": "Forever is composed of nows.",
        "author": "Emily Dickinson",
    },
    {
        "text": "You may delay, but time will not.",
        "author": "Benjamin Franklin",
    },
    {
        "text": "The present moment is filled with joy and happiness. If you are attentive, you will see it.",
        "author": "Thich Nhat Hanh",
    },
    {
        "text": "Time is a created thing. To say 'I don't have time' is to say 'I don't want to'.",
        "author": "Lao Tzu",
    },
    {
        "text": "Dost thou love life? Then do not squander time, for that is the stuff life is made of.",
        "author": "Benjamin Franklin",
    },
    {
        "text": "Yesterday is gone. Tomorrow has not yet come. We have only today. Let us begin.",
        "author": "Mother Teresa",
    },
)


def quote_at(index: int) -> Quote:
    return QUOTES[index % len(QUOTES)]


def quote_for_hour(hour: int) -> Quote:
    """The quote shown during `hour`; it changes once per hour."""
    return quote_at(hour % len(QUOTES))
