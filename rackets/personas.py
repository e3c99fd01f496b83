# rackets/personas.py
# Player persona for every cube cell.

from dataclasses import asdict, dataclass, field
from typing import List

from .cube import Cell

POWER_LABELS = {1: "Control", 2: "Balanced", 3: "Power"}
WEIGHT_LABELS = {1: "Light", 2: "Medium", 3: "Heavy"}
FEEL_LABELS = {1: "Soft", 2: "Medium", 3: "Firm"}

AXIS_LABELS = {
    "power": {"name": "Power Bias", "labels": ["Control", "Balanced", "Power"]},
    "weight": {"name": "Weight", "labels": ["Light", "Medium", "Heavy"]},
    "feel": {"name": "Feel", "labels": ["Soft", "Medium", "Firm"]},
}

# keyed by (power_bias, maneuverability, feel)
PERSONA_NAMES = {
    # corners
    (1, 1, 1): "Comfort Control",
    (1, 1, 3): "Precision Controller",
    (1, 3, 1): "Stable Defender",
    (1, 3, 3): "Solid Wall",
    (3, 1, 1): "Quick Striker",
    (3, 1, 3): "Agile Attacker",
    (3, 3, 1): "Power Comfort",
    (3, 3, 3): "Power Cannon",
    # edges
    (1, 2, 1): "Soft Touch Artist",
    (1, 2, 3): "Tactical Precision",
    (2, 1, 1): "Easy Cruiser",
    (2, 1, 3): "Swift Precision",
    (2, 3, 1): "Comfort Tank",
    (2, 3, 3): "Stable Hammer",
    (1, 1, 2): "Light Control",
    (1, 3, 2): "Defensive Anchor",
    (3, 1, 2): "Fast Power",
    (3, 3, 2): "Heavy Hitter",
    # face centres
    (1, 2, 2): "Control Specialist",
    (3, 2, 2): "Power Player",
    (2, 1, 2): "Light Allrounder",
    (2, 3, 2): "Solid Allrounder",
    (2, 2, 1): "Soft Allrounder",
    (2, 2, 3): "Firm Allrounder",
    # centre
    (2, 2, 2): "Perfect Balance",
}

MAX_IDEAL_FOR = 4


@dataclass
class Persona:
    name: str
    short_description: str
    detailed_description: str
    ideal_for: List[str] = field(default_factory=list)

    def as_dict(self):
        return asdict(self)


def axis_label(axis: str, value: int) -> str:
    return AXIS_LABELS[axis]["labels"][value - 1]


def _short_description(cell: Cell) -> str:
    if cell == (2, 2, 2):
        return "The ultimate versatile racket for players who want it all."

    parts = [{
        1: "excellent control and touch",
        2: "balanced power-control ratio",
        3: "explosive power potential",
    }[cell.power_bias]]

    if cell.maneuverability == 1:
        parts.append("easy to swing")
    elif cell.maneuverability == 3:
        parts.append("stable through contact")

    if cell.feel == 1:
        parts.append("forgiving and comfortable")
    elif cell.feel == 3:
        parts.append("crisp and precise")

    text = ", ".join(parts)
    return text[0].upper() + text[1:] + "."


def _detailed_description(cell: Cell) -> str:
    sentences = [{
        1: "This racket prioritizes control and placement over raw power, "
           "featuring a larger sweet spot for consistent shots.",
        2: "A versatile design that balances power generation with control, "
           "suitable for varied playing styles.",
        3: "Built for players who want to dominate with power, this racket "
           "delivers explosive shots but requires good technique.",
    }[cell.power_bias], {
        1: "The lightweight construction makes it easy to maneuver and reduces "
           "arm strain during long sessions.",
        2: "Standard weight offers a good balance of maneuverability and stability.",
        3: "The heavier build provides stability and plow-through on contact, "
           "ideal for players with solid fundamentals.",
    }[cell.maneuverability]]

    if cell.feel == 1:
        sentences.append(
            "Soft materials absorb vibrations and add comfort, making it "
            "arm-friendly and forgiving on off-center hits."
        )
    elif cell.feel == 3:
        sentences.append(
            "A firm frame delivers crisp, direct feedback and precise "
            "shot-making for technically proficient players."
        )

    return " ".join(sentences)


def _ideal_for(cell: Cell) -> List[str]:
    ideal = list({
        1: ["Defensive players", "Touch players"],
        2: ["All-court players"],
        3: ["Aggressive players", "Power hitters"],
    }[cell.power_bias])

    if cell.maneuverability == 1:
        ideal += ["Beginners", "Players with arm concerns"]
    elif cell.maneuverability == 3:
        ideal += ["Advanced players", "Strong athletes"]

    if cell.feel == 1:
        ideal.append("Comfort seekers")
    elif cell.feel == 3:
        ideal.append("Precision players")

    return list(dict.fromkeys(ideal))[:MAX_IDEAL_FOR]


def get_persona(cell: Cell) -> Persona:
    return Persona(
        name=PERSONA_NAMES[tuple(cell)],
        short_description=_short_description(cell),
        detailed_description=_detailed_description(cell),
        ideal_for=_ideal_for(cell),
    )
