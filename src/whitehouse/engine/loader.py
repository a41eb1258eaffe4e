"""Load a World from a JSON world file.

The file holds a table of scenes keyed by id plus a starting scene id:

    {
      "title": "...", "intro": "...",
      "startScene": "westOfHouse", "maxScore": 350,
      "trophyContainer": "trophyCase",
      "scenes": {
        "<sceneId>": {
          "name": "...", "region": "...", "light": true,
          "descriptions": {"default": "...", "states": {"flagA,!flagB": "..."}},
          "objects": {"<objectId>": {...}},
          "exits": [{"direction": "north", "targetScene": "...", ...}]
        }
      }
    }

Keys are camelCase. Object ids must be unique across the whole world.
"""

import json
from pathlib import Path
from typing import Any

from ..logging import get_logger
from .world import Descriptions, Interaction, Scene, SceneExit, SceneObject, World

logger = get_logger(__name__)


class WorldLoadError(Exception):
    """The world file is missing, malformed, or inconsistent."""


def _strings(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(str(item) for item in value)


def _descriptions(data: dict[str, Any] | str | None) -> Descriptions:
    if data is None:
        return Descriptions()
    if isinstance(data, str):
        return Descriptions(default=data)
    return Descriptions(
        default=data.get("default", ""),
        examine=data.get("examine"),
        empty=data.get("empty"),
        contents=data.get("contents"),
        dark=data.get("dark"),
        visited=data.get("visited"),
        states=dict(data.get("states", {})),
    )


def _interaction(data: dict[str, Any]) -> Interaction:
    return Interaction(
        message=data.get("message", ""),
        failure_message=data.get("failureMessage"),
        required_flags=_strings(data.get("requiredFlags")),
        grants_flags=_strings(data.get("grantsFlags")),
        removes_flags=_strings(data.get("removesFlags")),
        reveals_objects=_strings(data.get("revealsObjects")),
        score=int(data.get("score", 0)),
        states=dict(data.get("states", {})),
        target_scene=data.get("targetScene"),
    )


def _scene_object(object_id: str, scene_id: str, data: dict[str, Any]) -> SceneObject:
    capacity = data.get("capacity")
    light_life = data.get("lightLife")
    return SceneObject(
        id=object_id,
        name=data["name"],
        scene_id=scene_id,
        descriptions=_descriptions(data.get("descriptions")),
        visible_on_entry=bool(data.get("visibleOnEntry", False)),
        can_take=bool(data.get("canTake", False)),
        weight=int(data.get("weight", 0)),
        is_container=bool(data.get("isContainer", False)),
        capacity=int(capacity) if capacity is not None else None,
        contents=_strings(data.get("contents")),
        open=bool(data.get("open", False)),
        locked=bool(data.get("locked", False)),
        provides_light=bool(data.get("providesLight", False)),
        light_life=int(light_life) if light_life is not None else None,
        moveable=bool(data.get("moveable", False)),
        on_move=data.get("onMove"),
        is_treasure=bool(data.get("isTreasure", False)),
        scoring={verb: int(points) for verb, points in data.get("scoring", {}).items()},
        container_targets={
            target: int(points)
            for target, points in data.get("containerTargets", {}).items()
        },
        interactions={
            verb: _interaction(interaction)
            for verb, interaction in data.get("interactions", {}).items()
        },
    )


def _scene_exit(data: dict[str, Any]) -> SceneExit:
    return SceneExit(
        direction=data["direction"].lower(),
        target_scene=data["targetScene"],
        description=data.get("description", ""),
        required_flags=_strings(data.get("requiredFlags")),
        failure_message=data.get("failureMessage"),
        score=int(data.get("score", 0)),
    )


def _scene(scene_id: str, data: dict[str, Any]) -> Scene:
    return Scene(
        id=scene_id,
        name=data.get("name", scene_id),
        region=data.get("region", ""),
        light=bool(data.get("light", False)),
        descriptions=_descriptions(data.get("descriptions")),
        objects={
            object_id: _scene_object(object_id, scene_id, obj)
            for object_id, obj in data.get("objects", {}).items()
        },
        exits=tuple(_scene_exit(scene_exit) for scene_exit in data.get("exits", [])),
    )


def _validate(world: World) -> None:
    if world.start_scene not in world.scenes:
        raise WorldLoadError(f"Unknown start scene: {world.start_scene!r}")

    for scene in world.scenes.values():
        for scene_exit in scene.exits:
            if scene_exit.target_scene not in world.scenes:
                raise WorldLoadError(
                    f"Exit {scene_exit.direction!r} from {scene.id!r} leads to "
                    f"unknown scene {scene_exit.target_scene!r}"
                )

    for obj in world.objects.values():
        for content_id in obj.contents:
            if content_id not in world.objects:
                raise WorldLoadError(
                    f"Container {obj.id!r} holds unknown object {content_id!r}"
                )
        for verb, interaction in obj.interactions.items():
            target = interaction.target_scene
            if target is not None and target not in world.scenes:
                raise WorldLoadError(
                    f"Interaction {verb!r} on {obj.id!r} leads to unknown scene {target!r}"
                )
            for revealed in interaction.reveals_objects:
                if revealed not in world.objects:
                    raise WorldLoadError(
                        f"Interaction {verb!r} on {obj.id!r} reveals unknown "
                        f"object {revealed!r}"
                    )

    trophy = world.trophy_container
    if trophy is not None:
        container = world.objects.get(trophy)
        if container is None or not container.is_container:
            raise WorldLoadError(f"Trophy container {trophy!r} is not a container")


def build_world(data: dict[str, Any]) -> World:
    """Build and validate a World from already-decoded JSON data."""
    try:
        scenes = {
            scene_id: _scene(scene_id, scene)
            for scene_id, scene in data["scenes"].items()
        }
        world = World(
            scenes=scenes,
            start_scene=data["startScene"],
            title=data.get("title", ""),
            intro=data.get("intro", ""),
            max_score=int(data.get("maxScore", 0)),
            trophy_container=data.get("trophyContainer"),
        )
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise WorldLoadError(f"Malformed world data: {exc!r}") from exc

    for scene in scenes.values():
        for object_id, obj in scene.objects.items():
            if object_id in world.objects:
                raise WorldLoadError(f"Duplicate object id: {object_id!r}")
            world.objects[object_id] = obj

    _validate(world)
    return world


def load_world(data_path: Path) -> World:
    """Read and validate the world file at ``data_path``."""
    try:
        with open(data_path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as exc:
        raise WorldLoadError(f"Cannot read world file {data_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise WorldLoadError(f"Invalid JSON in {data_path}: {exc}") from exc

    world = build_world(data)
    logger.debug(
        "world_parsed",
        path=str(data_path),
        scenes=len(world.scenes),
        objects=len(world.objects),
    )
    return world
