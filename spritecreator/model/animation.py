"""
Animation timeline models.

- AnimationFrame: Layers shown together for a duration in milliseconds
- Animation: Named sequence of 1-256 frames

Both behave like values: inputs are copied on the way in and getters hand
out copies, so callers never share internal state with an instance.

Serialized form (as stored in a sprite document):
    {"frames": [{"layerRefs": ["layer0", "layer2"], "duration": 100}, ...]}

The animation name is the key of the document's ``animations`` mapping and
is not part of the serialized animation itself.
"""

from collections.abc import Iterable
from typing import Any

from spritecreator.exceptions import (
    CapacityError,
    InvalidDurationError,
    LastFrameError,
    OutOfBoundsError,
)
from spritecreator.validation import (
    MAX_ANIMATION_FRAMES,
    validate_layer_ref,
    validate_name,
)


def _validate_layer_refs(layer_refs: Iterable[str]) -> list[str]:
    return [validate_layer_ref(ref) for ref in layer_refs]


def _validate_duration(duration: int) -> int:
    if isinstance(duration, bool) or not isinstance(duration, int):
        raise InvalidDurationError(f'Duration must be an integer, got {duration!r}')
    if duration <= 0:
        raise InvalidDurationError('Duration must be positive')
    return duration


class AnimationFrame:
    """A single timeline frame."""

    def __init__(self, layer_refs: Iterable[str], duration: int):
        """
        :param layer_refs: Ids of the layers shown in this frame, e.g. ["layer0"].
            May be empty.
        :param duration: Display time in milliseconds, > 0
        """
        self._layer_refs = _validate_layer_refs(layer_refs)
        self._duration = _validate_duration(duration)

    def get_layer_refs(self) -> list[str]:
        return list(self._layer_refs)

    def set_layer_refs(self, layer_refs: Iterable[str]) -> None:
        self._layer_refs = _validate_layer_refs(layer_refs)

    def get_duration(self) -> int:
        """Get the frame duration in milliseconds."""
        return self._duration

    def set_duration(self, duration: int) -> None:
        self._duration = _validate_duration(duration)

    def clone(self) -> 'AnimationFrame':
        return AnimationFrame(self._layer_refs, self._duration)

    def to_dict(self) -> dict[str, Any]:
        return {'layerRefs': list(self._layer_refs), 'duration': self._duration}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'AnimationFrame':
        return cls(data['layerRefs'], data['duration'])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AnimationFrame):
            return NotImplemented
        return self._layer_refs == other._layer_refs and self._duration == other._duration

    def __repr__(self) -> str:
        return f'AnimationFrame({self._layer_refs!r}, {self._duration})'


class Animation:
    """
    Named frame sequence.

    Example:
        >>> walk = Animation('walk', [AnimationFrame([f'layer{i}'], 100) for i in range(8)])
        >>> walk.get_frame_count(), walk.get_total_duration()
        (8, 800)
    """

    def __init__(self, name: str, frames: Iterable[AnimationFrame]):
        """
        :param name: Letters, digits and underscores, starting with a letter
        :param frames: 1 to 256 frames. Each frame is copied.
        """
        validate_name(name)
        frames = list(frames)
        if not frames:
            raise CapacityError('Animation must have at least one frame')
        if len(frames) > MAX_ANIMATION_FRAMES:
            raise CapacityError(
                f'Animation cannot have more than {MAX_ANIMATION_FRAMES} frames'
            )
        self._name = name
        self._frames = [frame.clone() for frame in frames]

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._frames):
            raise OutOfBoundsError(
                f'Frame index {index} out of bounds for {len(self._frames)} frames'
            )

    def get_name(self) -> str:
        return self._name

    def get_frames(self) -> list[AnimationFrame]:
        """Get copies of all frames in playback order."""
        return [frame.clone() for frame in self._frames]

    def get_frame_count(self) -> int:
        return len(self._frames)

    def get_total_duration(self) -> int:
        """Get the sum of all frame durations in milliseconds."""
        return sum(frame.get_duration() for frame in self._frames)

    def get_frame(self, index: int) -> AnimationFrame:
        """Get a copy of the frame at index."""
        self._check_index(index)
        return self._frames[index].clone()

    def set_frame(self, index: int, frame: AnimationFrame) -> None:
        """Replace the frame at index with a copy of frame."""
        self._check_index(index)
        self._frames[index] = frame.clone()

    def add_frame(self, frame: AnimationFrame) -> None:
        """
        Append a copy of frame.

        :raises CapacityError: If the animation already has 256 frames
        """
        if len(self._frames) >= MAX_ANIMATION_FRAMES:
            raise CapacityError(
                f'Cannot add frame: animation already has maximum of '
                f'{MAX_ANIMATION_FRAMES} frames'
            )
        self._frames.append(frame.clone())

    def remove_frame(self, index: int) -> None:
        """
        Remove the frame at index.

        :raises LastFrameError: If it is the only frame
        """
        self._check_index(index)
        if len(self._frames) == 1:
            raise LastFrameError('Cannot remove the last frame')
        del self._frames[index]

    def move_frame(self, from_index: int, to_index: int) -> None:
        """Move a frame to a new position, shifting the frames in between."""
        self._check_index(from_index)
        self._check_index(to_index)
        frame = self._frames.pop(from_index)
        self._frames.insert(to_index, frame)

    def frame_index_at(self, elapsed_ms: int, loop: bool = True) -> int:
        """
        Get the index of the frame showing after elapsed_ms of playback.

        :param elapsed_ms: Time since playback started, >= 0
        :param loop: Wrap around after the last frame. Without looping the
            last frame stays visible.
        """
        if elapsed_ms < 0:
            raise OutOfBoundsError(f'Elapsed time must not be negative, got {elapsed_ms}')
        total = self.get_total_duration()
        if loop:
            elapsed_ms %= total
        elif elapsed_ms >= total:
            return len(self._frames) - 1

        for index, frame in enumerate(self._frames):
            elapsed_ms -= frame.get_duration()
            if elapsed_ms < 0:
                return index
        return len(self._frames) - 1

    def clone(self) -> 'Animation':
        return Animation(self._name, self._frames)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the frames. The name is not included."""
        return {'frames': [frame.to_dict() for frame in self._frames]}

    @classmethod
    def from_dict(cls, name: str, data: dict[str, Any]) -> 'Animation':
        """
        Create an animation from its serialized frames.

        :param name: Animation name, kept outside the serialized data
        :param data: {"frames": [...]}
        """
        return cls(name, [AnimationFrame.from_dict(frame) for frame in data['frames']])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Animation):
            return NotImplemented
        return self._name == other._name and self._frames == other._frames

    def __repr__(self) -> str:
        return f'Animation({self._name!r}, {len(self._frames)} frames)'
