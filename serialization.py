"""Serialization of results to JSON-friendly dicts."""

from __future__ import annotations
from typing import Any, Dict, List
import json

from core import Pos
from navigator import Itinerary, Trip
from problem import Solution


# ===== Basic Types =====


def serialize_pos(pos: Pos) -> Dict[str, int]:
    return {"x": pos.x, "y": pos.y}


def deserialize_pos(data: Dict[str, Any]) -> Pos:
    return Pos(x=data["x"], y=data["y"])


# ===== Trips =====


def serialize_trip(trip: Trip) -> Dict[str, Any]:
    return {
        "start": serialize_pos(trip.start),
        "goal": serialize_pos(trip.goal),
        "start_minute": trip.start_minute,
        "duration": trip.duration,
        "path": [serialize_pos(p) for p in trip.path],
    }


def deserialize_trip(data: Dict[str, Any]) -> Trip:
    trip = Trip(
        start=deserialize_pos(data["start"]),
        goal=deserialize_pos(data["goal"]),
        start_minute=data["start_minute"],
        path=tuple(deserialize_pos(p) for p in data["path"]),
    )
    if "duration" in data and data["duration"] != trip.duration:
        raise ValueError(
            f"duration {data['duration']} does not match path of {trip.duration} steps"
        )
    return trip


def serialize_itinerary(itinerary: Itinerary) -> Dict[str, Any]:
    return {
        "total_minutes": itinerary.total_minutes,
        "legs": [serialize_trip(leg) for leg in itinerary.legs],
    }


def deserialize_itinerary(data: Dict[str, Any]) -> Itinerary:
    legs: List[Trip] = [deserialize_trip(leg) for leg in data["legs"]]
    return Itinerary(legs=tuple(legs))


# ===== Solution =====


def serialize_solution(solution: Solution) -> Dict[str, int]:
    return {"part_one": solution.part_one, "part_two": solution.part_two}


def solution_to_json(solution: Solution) -> str:
    return json.dumps(serialize_solution(solution))
