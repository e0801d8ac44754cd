from dataclasses import dataclass
from inquirer import prompt, List
from inquirer.themes import load_theme_from_dict


@dataclass
class Mode:
    soft_id: int | str
    text: str
    type: str = ""
    is_numeric: bool = True

    def __str__(self) -> str:
        return self.text


def ask_question(question: str, modes: list):
    total_numerics = 0
    choices = []
    for mode in modes:
        mode_numeric = ""
        if mode.is_numeric:
            total_numerics += 1
            mode_numeric = f"{total_numerics}. "

        choices.append((f"{mode_numeric}{mode}", mode.soft_id))

    questions = [
        List(
            name='custom_question',
            message=question,
            choices=choices,
            carousel=True,
        )
    ]

    raw_answer = prompt(
        questions=questions,
        raise_keyboard_interrupt=True,
        theme=THEME,
    )
    return next((mode for mode in modes if mode.soft_id == raw_answer['custom_question']))


def choose_platform():
    return ask_question(
        question="🎮 Choose platform",
        modes=[
            Mode(soft_id="blum", text="Blum"),
            Mode(soft_id="yescoin", text="YesCoin"),
            Mode(soft_id="tsubasa", text="Tsubasa"),
            Mode(soft_id="paws", text="PAWS"),
        ]
    ).soft_id


def choose_version(default: str = "v4"):
    modes = [
        Mode(soft_id="v3r2", text="V3R2"),
        Mode(soft_id="v4", text="V4"),
        Mode(soft_id="v5", text="V5"),
    ]
    # default version goes first so Enter picks it
    modes.sort(key=lambda mode: mode.soft_id != default)
    return ask_question(question="👛 Choose wallet version", modes=modes).soft_id


def choose_mode():
    return ask_question(
        question="🚀 Choose an action",
        modes=[
            Mode(soft_id="connect", type="batch", text="Connect wallets"),
            Mode(soft_id="disconnect", type="batch", text="Disconnect wallets"),
            Mode(soft_id="display", type="batch", text="Display all wallets"),
            Mode(soft_id="exit", type="exit", text="← Exit", is_numeric=False),
        ]
    )


def choose_after_batch():
    return ask_question(
        question="📋 What next?",
        modes=[
            Mode(soft_id="menu", type="menu", text="Back to main menu"),
            Mode(soft_id="exit", type="exit", text="Exit"),
        ]
    )


THEME = load_theme_from_dict({"List": {
    "selection_cursor": "👉🏻",
}})
