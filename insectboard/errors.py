"""Insect Board exception hierarchy.

Every domain error carries a fixed, human-readable message.  The CLI
writes that message verbatim to the output file, so the texts here are
part of the program's observable behaviour.
"""


class InsectBoardError(Exception):
    """Root of all Insect Board domain exceptions."""

    message = "Insect board error"

    def __init__(self, msg: str | None = None) -> None:
        super().__init__(msg or self.message)


# -- Board ---------------------------------------------------------------------


class BoardError(InsectBoardError):
    """Errors raised by the grid registry."""


class CollisionError(BoardError):
    """An entity was placed onto an occupied cell."""

    message = "Two entities in the same position"


class InvalidSizeError(BoardError):
    """A board size the grid cannot represent."""

    message = "Invalid board size"


# -- Simulation ----------------------------------------------------------------


class SimulationError(InsectBoardError):
    """Errors during turn resolution."""


class MovementError(SimulationError):
    """A direction outside the species' movement set was requested."""

    message = "Unsupported movement direction"


class TurnOrderError(SimulationError):
    """The engine was stepped after every insect had been resolved."""

    message = "All insects have already moved"


# -- Scenario input ------------------------------------------------------------


class ScenarioError(InsectBoardError):
    """Invalid scenario input, raised before anything reaches the grid."""


class InvalidBoardSizeError(ScenarioError, InvalidSizeError):
    message = "Invalid board size"


class InvalidNumberOfInsectsError(ScenarioError):
    message = "Invalid number of insects"


class InvalidNumberOfFoodPointsError(ScenarioError):
    message = "Invalid number of food points"


class InvalidInsectColorError(ScenarioError):
    message = "Invalid insect color"


class InvalidInsectTypeError(ScenarioError):
    message = "Invalid insect type"


class InvalidEntityPositionError(ScenarioError):
    message = "Invalid entity position"


class DuplicateInsectError(ScenarioError):
    message = "Duplicate insects"


class InvalidFoodValueError(ScenarioError):
    message = "Invalid food value"


class MissingInputError(ScenarioError):
    message = "Missing input lines"
