"""Tutorial video links and other external resources."""

from collections.abc import Mapping, Sequence
from types import MappingProxyType

from ..exceptions import TutorialMappingError
from .progressions import GOALS, normalize_exercise, normalize_level

TUTORIAL_URL_PREFIX = "https://www.youtube.com/watch?v="

PLAYLISTS_URL = "https://www.youtube.com/@convictedcondition/playlists"

RESOURCES: MappingProxyType = MappingProxyType(
    {
        "workout-template": (
            "https://drive.google.com/file/d/"
            "19zXstmNsSoT6hmseO-nU-h2NNiIK-X2R/view?usp=drive_link"
        ),
    }
)

TUTORIAL_USAGE = (
    "usage: cali tutorial <exercise> <level> "
    '(quote multi-word values, e.g. cali tutorial "Handstand Push-ups" "Wall Headstand")'
)


def _yt(video_id: str) -> str:
    return TUTORIAL_URL_PREFIX + video_id


TUTORIALS: MappingProxyType = MappingProxyType(
    {
        "Pushups": MappingProxyType(
            {
                "Wall": _yt("N5C9NUHZ20U"),
                "Incline": _yt("Gv8y_prZBZY"),
                "Kneeling": _yt("NyzxeqY6CR8"),
                "Half": _yt("bGuUODcwnHA"),
                "Full": _yt("1QJICN6udbs"),
                "Close": _yt("3-1vRVuWgBc"),
                "Uneven": _yt("o1abTRdwpUs"),
                "Half One-Arm": _yt("63077t3I4Zc"),
                "Lever": _yt("Hwq5zdb-owA"),
                "One-Arm": _yt("ReKZry7JQEQ"),
            }
        ),
        "Squats": MappingProxyType(
            {
                "Shoulderstand": _yt("a-JNXY_hnSs"),
                "Jackknife": _yt("QhyRsrPOkoY"),
                "Supported": _yt("cLQS5mZmXN0"),
                "Half": _yt("tIHNkW0nGFg"),
                "Full": _yt("S3bNmmxkh_k"),
                "Close": _yt("MiNzsa9MIpI"),
                "Uneven": _yt("UhslmLWprQg"),
                "Half One-Leg": _yt("dZON2MCVdfg"),
                "Assisted One-Leg": _yt("9Mcs9M1HORQ"),
                "One-Leg": _yt("fNCTWGl1Q8A"),
            }
        ),
        "Pullups": MappingProxyType(
            {
                "Vertical": _yt("F8kIJMeqCMs"),
                "Horizontal": _yt("YN0vvoqssfw"),
                "Jackknife": _yt("58ss6OF4fmQ"),
                "Half": _yt("vsRRJGHhKnA"),
                "Full": _yt("9HBukpLkZIM"),
                "Close": _yt("Om_3c0jozTc"),
                "Uneven": _yt("fCHcb4MB1FM"),
                "Half One-Arm": _yt("ve0EIQdRLag"),
                "Assisted One-Arm": _yt("W8DBEewoDmY"),
                "One-Arm": _yt("2tHTY6ZKzkc"),
            }
        ),
        "Leg Raises": MappingProxyType(
            {
                "Knee Tuck": _yt("N8k-SeCkR0s"),
                "Knee Raise": _yt("98ragSP4gC8"),
                "Bent Leg": _yt("qq69_MifXAc"),
                "Frog": _yt("esoUyks3PZM"),
                "Flat": _yt("hav89ezKkPA"),
                "Hanging Knee": _yt("t2MU4Q4V3Xk"),
                "Hanging Bent": _yt("CtFMjDbU0P4"),
                "Partial": _yt("y4cCwSpScPo"),
                "Hanging": _yt("7jI6fDNY_yM"),
            }
        ),
        "Bridges": MappingProxyType(
            {
                "Short": _yt("JQFddjAFWZw"),
                "Straight": _yt("gkTVDJHHIZ0"),
                "Angled": _yt("o9yKAjvUQlM"),
                "Head": _yt("BIq3sAZAekg"),
                "Half": _yt("JXHnTtE9NSk"),
                "Full": _yt("qnU9LoO5Cyg"),
                "Wall Down": _yt("LD1h45ArqcY"),
                "Wall Up": _yt("sc_hsEM7xnA"),
                "Closing": _yt("tGv50Whxouk"),
                "Stand-to-Stand": _yt("wZnixqvk-24"),
            }
        ),
    }
)


def resolve_tutorial(exercise: str, level: str) -> str:
    """Return the tutorial link for a level, or "" if none is mapped."""
    return TUTORIALS.get(exercise, {}).get(level, "")


def validate_tutorial_links(
    tutorials: Mapping[str, Mapping[str, str]] = TUTORIALS,
    goals: Mapping[str, Mapping[str, str]] = GOALS,
) -> None:
    """Check that every tutorial points at a known level and a video URL.

    Raises:
        TutorialMappingError: On the first unknown exercise, unknown level
            or malformed link.
    """
    for exercise, levels in tutorials.items():
        goal_levels = goals.get(exercise)
        if goal_levels is None:
            raise TutorialMappingError(f"unknown exercise key in tutorials: {exercise!r}")

        for level, link in levels.items():
            if level not in goal_levels:
                raise TutorialMappingError(
                    f"unknown level key in tutorials: {exercise!r} -> {level!r}"
                )
            if not link.strip().startswith(TUTORIAL_URL_PREFIX):
                raise TutorialMappingError(
                    f"invalid youtube link for {exercise!r} -> {level!r}: {link!r}"
                )


def parse_tutorial_args(args: Sequence[str]) -> tuple[str, str]:
    """Split command-line words into an (exercise, level) pair.

    Both names may contain spaces, so the longest word prefix that names an
    exercise wins and the remaining words must name one of its levels.

    Args:
        args: Words as typed, e.g. ["handstand", "push-ups", "wall", "headstand"]

    Returns:
        Canonical (exercise, level) names

    Raises:
        ValueError: If the words do not name an exercise and one of its levels
    """
    if len(args) < 2:
        raise ValueError(TUTORIAL_USAGE)

    for split in range(len(args) - 1, 0, -1):
        exercise = normalize_exercise(" ".join(args[:split]))
        if exercise is None:
            continue

        level_text = " ".join(args[split:])
        level = normalize_level(exercise, level_text)
        if level is None:
            raise ValueError(f"unknown level {level_text!r} for {exercise}")
        return exercise, level

    raise ValueError(f"unknown exercise {' '.join(args)!r}")
