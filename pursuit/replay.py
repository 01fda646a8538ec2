# pursuit/replay.py
"""Replay recorded target tracks through a PredictionService."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Optional

from pursuit.config import PredictionConfig, load_document
from pursuit.core.track import InterceptSolution, Observation
from pursuit.core.vec import Vec3
from pursuit.service import PredictionService
from pursuit.utils.errors import ValidationError

logger = logging.getLogger(__name__)


@dataclass
class Track:
    """A recorded target track plus the follower that chases it."""
    samples: List[Observation]
    config: PredictionConfig = field(default_factory=PredictionConfig)
    follower_position: Vec3 = field(default_factory=Vec3)
    follower_speed: Optional[float] = None
    name: str = "track"


@dataclass
class ReplayFrame:
    """Service outputs after one replayed sample."""
    timestamp: float
    position: Vec3
    accepted: bool
    predicted: Vec3
    intercept: InterceptSolution

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "position": self.position.to_dict(),
            "accepted": self.accepted,
            "predicted": self.predicted.to_dict(),
            "intercept": self.intercept.to_dict(),
        }


def parse_track(data: Dict[str, Any], name: str = "track") -> Track:
    """Build a Track from a parsed YAML/JSON document.

    Args:
        data: Mapping with ``samples`` and optional ``config``/``follower``

    Returns:
        Track
    """
    if not isinstance(data, dict):
        raise ValidationError("Track document must be a mapping")
    raw_samples = data.get("samples")
    if not raw_samples:
        raise ValidationError("Track document has no samples")

    samples = [Observation.from_dict(s) for s in raw_samples]
    config = PredictionConfig.from_dict(data.get("config") or {})

    follower = data.get("follower") or {}
    if not isinstance(follower, dict):
        raise ValidationError("Track 'follower' must be a mapping with 'position' and 'speed'")
    try:
        follower_position = Vec3.from_any(follower.get("position", {}))
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid follower position: {e}") from e
    follower_speed = follower.get("speed")
    if follower_speed is not None:
        try:
            follower_speed = float(follower_speed)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Invalid follower speed: {follower_speed!r}") from e

    return Track(samples=samples, config=config, follower_position=follower_position,
                 follower_speed=follower_speed, name=data.get("name", name))


def load_track(filepath: str) -> Track:
    """Load a track from a YAML or JSON file."""
    track = parse_track(load_document(filepath), name=filepath)
    logger.info(f"Loaded track '{track.name}' with {len(track.samples)} samples")
    return track


class TrackReplay:
    """Feeds samples to a service one tick at a time."""

    def __init__(self, service: PredictionService):
        self.service = service

    def run(self, samples: Iterable[Observation], follower_position: Vec3,
            follower_speed: Optional[float] = None) -> Iterator[ReplayFrame]:
        """Tick each sample and yield the service outputs after it.

        Args:
            samples: Observations in time order
            follower_position: Fixed follower position for intercept queries
            follower_speed: Follower speed (service default if None)

        Yields:
            ReplayFrame per sample
        """
        for observation in samples:
            accepted = self.service.tick(observation)
            yield ReplayFrame(
                timestamp=observation.timestamp,
                position=observation.position,
                accepted=accepted,
                predicted=self.service.predicted_position(),
                intercept=self.service.intercept_point(follower_position, follower_speed),
            )

    @classmethod
    def from_track(cls, track: Track) -> "TrackReplay":
        return cls(PredictionService(track.config))
