"""Turn a number into raindrop sounds based on its factors."""

_SOUNDS = ((3, "Pling"), (5, "Plang"), (7, "Plong"))


def raindrops(n: int) -> str:
    """Return the raindrop sounds for ``n``, or ``n`` itself if there are none."""
    sounds = "".join(sound for factor, sound in _SOUNDS if n % factor == 0)
    return sounds or str(n)