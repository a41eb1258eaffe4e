"""Standard player-facing messages."""

from ..logging import get_logger

logger = get_logger(__name__)

MESSAGES: dict[str, str] = {
    # Parse and dispatch
    "error.notUnderstood": "I don't understand that.",
    "error.unknownVerb": "I don't know how to do that.",
    "error.general": "Something went wrong.",
    "error.noObject": "What do you want to {action}?",
    # Lookup and visibility
    "error.objectNotFound": "You don't see any {item} here.",
    "error.objectNotVisible": "You can't see any {item} here.",
    "error.tooDark": "It's too dark to see.",
    "error.tooDarkAction": "It's too dark to {action} anything.",
    "error.noDescription": "You see nothing special about the {item}.",
    "error.cantPerformAction": "You can't {action} the {item}.",
    # Inventory
    "error.notHoldingItem": "You don't have the {item}.",
    "error.alreadyCarrying": "You're already carrying the {item}.",
    "error.cantTake": "You can't take the {item}.",
    "error.tooHeavy": "The {item} is too heavy to carry with everything else.",
    "error.inClosedContainer": "The {item} is inside the closed {container}.",
    "error.notInContainer": "The {item} isn't in the {container}.",
    # Containers
    "error.notContainer": "The {container} isn't a container.",
    "error.containerLocked": "The {container} is locked.",
    "error.containerClosed": "The {container} is closed.",
    "error.containerFull": "The {container} is full.",
    "error.alreadyOpen": "The {container} is already open.",
    "error.alreadyClosed": "The {container} is already closed.",
    "error.putInSelf": "You can't put the {item} inside itself.",
    "error.putWhere": "Where do you want to put the {item}?",
    # Reading and moving
    "error.cantRead": "There's nothing written on the {item}.",
    "error.cantMove": "You can't move the {item}.",
    "error.climbPointless": "Climbing the {item} would serve no purpose.",
    # Light
    "error.notLightSource": "The {item} isn't something you can turn on or off.",
    "error.lightDead": "The {item} has run out of power.",
    "error.alreadyOn": "The {item} is already on.",
    "error.alreadyOff": "The {item} is already off.",
    "error.turnWhat": "Turn what on or off?",
    # Movement
    "error.noExit": "You can't go that way.",
    "error.exitBlocked": "The way is blocked.",
    "error.whichWay": "Which way do you want to go?",
    # Successes
    "success.take": "Taken.",
    "success.takeFrom": "You take the {item} from the {container}.",
    "success.drop": "Dropped.",
    "success.putInContainer": "You put the {item} in the {container}.",
    "success.open": "You open the {container}.",
    "success.close": "You close the {container}.",
    "success.move": "You move the {item}.",
    "success.lightOn": "The {item} is now on.",
    "success.lightOff": "The {item} is now off.",
    # Containers and inventory listings
    "container.empty": "The {container} is empty.",
    "container.contents": "The {container} contains: {items}.",
    "inventory.empty": "You are empty-handed.",
    "inventory.carrying": "You are carrying:\n{items}",
    "inventory.weight": "Load: {current}/{max}",
    # Scenes
    "scene.dark": "It is pitch dark. You are likely to be eaten by a grue.",
    "scene.objects": "You can see: {items}.",
    # Light source running out
    "light.burnedOut": "Your {item} has run out of power.",
    "light.burnedOutDark": (
        "Your {item} has run out of power. It is now pitch dark."
    ),
    # Score
    "score.current": "Your score is {score} out of a possible {max}, in {turns} turns.",
    "score.won": "All the treasures are safely displayed. You have won!",
    # Help
    "help.verbs": "Commands I know: {verbs}.",
}


def message(key: str, **params: object) -> str:
    """Return the message for ``key`` with ``params`` substituted."""
    template = MESSAGES.get(key)
    if template is None:
        logger.warning("message_template_missing", key=key)
        return key
    if not params:
        return template
    return template.format(**params)
