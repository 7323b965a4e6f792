"""System factory for tween interpolation."""
from __future__ import annotations

import logging
from typing import Callable, Hashable, MutableMapping, TypeVar

from tick_ease import UnknownEasingError, get_easing

from tick_tween.components import Tween, tween_value

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)


def make_tween_system(
    on_complete: Callable[[K, Tween], None] | None = None,
) -> Callable[[MutableMapping[K, Tween], Callable[[K, float], None]], None]:
    """Build a per-tick system over a mapping of keyed tweens.

    Each call advances every tween by one tick and hands the new value to
    ``apply(key, value)``. Finished tweens receive ``end_val`` exactly, are
    removed from the mapping, and only then is ``on_complete(key, tween)``
    called, so the callback may chain a new tween under the same key.
    """

    def tween_system(
        tweens: MutableMapping[K, Tween],
        apply: Callable[[K, float], None],
    ) -> None:
        for key, tween in list(tweens.items()):
            # An earlier on_complete may have removed or replaced this entry.
            if tweens.get(key) is not tween:
                continue

            try:
                get_easing(tween.easing)
            except UnknownEasingError:
                logger.debug("skipping tween %r: unknown easing %r", key, tween.easing)
                continue

            tween.elapsed += 1
            apply(key, tween_value(tween))

            if tween.finished:
                tweens.pop(key, None)
                if on_complete is not None:
                    on_complete(key, tween)

    return tween_system
