"""
Task Records
============
Data structures for the tasks and results exchanged with the optimizer
backend, and the human-readable labels built from them.

The backend encodes every variant as a JSON object tagged with a "type"
field. The enums below are the closed set of accepted tags; `from_dict`
rejects anything else.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
import logging
from typing import Any, Dict, Optional

from onionplot.config import DEFAULT_CONFIG, EnvelopeConfig
from onionplot.model.points import Point
from onionplot.model.projector import project_to_view

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------------------
class ProblemType(StrEnum):
    ONE_MAX = "OneMax"
    LEADING_ONES = "LeadingOnes"
    TSP = "TSP"

    @property
    def is_bitstring(self) -> bool:
        return self in (ProblemType.ONE_MAX, ProblemType.LEADING_ONES)


class AlgorithmType(StrEnum):
    ONE_PLUS_ONE_EA = "OnePlusOneEA"
    SIMULATED_ANNEALING = "SimulatedAnnealing"
    ACO = "ACO"


class CoolingScheduleType(StrEnum):
    STATIC = "Static"
    EXPONENTIAL = "Exponential"


class UpdateStrategy(StrEnum):
    """Pheromone update strategy of the ACO backend."""
    BEST_SO_FAR = "BestSoFar"
    GENERATION_BEST = "GenerationBest"
    ALL_ANTS = "AllAnts"


# p_best and q are optional on the backend
ACO_REQUIRED_FIELDS = ("alpha", "beta", "evap_factor", "ants", "nn", "update_strategy")

# Short labels for the legend and task descriptions
ALGORITHM_NAMES: Dict[AlgorithmType, str] = {
    AlgorithmType.ONE_PLUS_ONE_EA: "(1+1) EA",
    AlgorithmType.SIMULATED_ANNEALING: "SA",
    AlgorithmType.ACO: "ACO",
}


def _parse_enum(enum_cls: type[StrEnum], value: Any) -> Any:
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValueError(f"Unknown {enum_cls.__name__} '{value}'. Expected one of: {allowed}.") from None


def _require(data: Dict[str, Any], fields: tuple[str, ...], owner: str) -> None:
    missing = [name for name in fields if data.get(name) is None]
    if missing:
        raise ValueError(f"{owner} requires: " + ", ".join(f"'{name}'" for name in missing) + ".")


def _drop_none(data: Dict[str, Any]) -> Dict[str, Any]:
    return {key: val for key, val in data.items() if val is not None}


def _format_number(value: float) -> str:
    """Print whole numbers without a trailing '.0'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# ------------------------------------------------------------------------------
# Data Structures
# ------------------------------------------------------------------------------
@dataclass
class Problem:
    type: ProblemType
    bitstring_size: Optional[int] = None
    tsp_instance: Optional[str] = None
    tsp_name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none({
            "type": self.type.value,
            "bitstring_size": self.bitstring_size,
            "tsp_instance": self.tsp_instance,
            "tsp_name": self.tsp_name,
        })

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> Problem:
        problem_type = _parse_enum(ProblemType, data.get("type"))
        size = data.get("bitstring_size")
        if problem_type.is_bitstring and size is None:
            raise ValueError(f"Problem '{problem_type}' requires 'bitstring_size'.")
        return Problem(
            type=problem_type,
            bitstring_size=int(size) if size is not None else None,
            tsp_instance=data.get("tsp_instance"),
            tsp_name=data.get("tsp_name"),
        )


@dataclass
class CoolingSchedule:
    type: CoolingScheduleType
    temperature: Optional[float] = None
    cooling_rate: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none({
            "type": self.type.value,
            "temperature": self.temperature,
            "cooling_rate": self.cooling_rate,
        })

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> CoolingSchedule:
        schedule_type = _parse_enum(CoolingScheduleType, data.get("type"))
        match schedule_type:
            case CoolingScheduleType.STATIC:
                _require(data, ("temperature",), "Static cooling schedule")
            case CoolingScheduleType.EXPONENTIAL:
                _require(data, ("cooling_rate",), "Exponential cooling schedule")
        return CoolingSchedule(
            type=schedule_type,
            temperature=data.get("temperature"),
            cooling_rate=data.get("cooling_rate"),
        )


@dataclass
class AlgorithmConfig:
    """
    Algorithm selection and its parameters.

    Only the fields of the selected algorithm are set:
    - SimulatedAnnealing: cooling_schedule
    - ACO: alpha, beta, evap_factor, ants, p_best, q, nn, update_strategy
    """
    type: AlgorithmType
    cooling_schedule: Optional[CoolingSchedule] = None
    alpha: Optional[float] = None
    beta: Optional[float] = None
    evap_factor: Optional[float] = None
    ants: Optional[int] = None
    p_best: Optional[float] = None
    q: Optional[float] = None
    nn: Optional[bool] = None
    update_strategy: Optional[UpdateStrategy] = None

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none({
            "type": self.type.value,
            "cooling_schedule": self.cooling_schedule.to_dict() if self.cooling_schedule else None,
            "alpha": self.alpha,
            "beta": self.beta,
            "evap_factor": self.evap_factor,
            "ants": self.ants,
            "p_best": self.p_best,
            "q": self.q,
            "nn": self.nn,
            "update_strategy": self.update_strategy.value if self.update_strategy else None,
        })

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> AlgorithmConfig:
        algorithm_type = _parse_enum(AlgorithmType, data.get("type"))

        cooling_schedule = None
        if algorithm_type == AlgorithmType.SIMULATED_ANNEALING:
            if "cooling_schedule" not in data:
                raise ValueError("SimulatedAnnealing requires a 'cooling_schedule'.")
            cooling_schedule = CoolingSchedule.from_dict(data["cooling_schedule"])
        elif algorithm_type == AlgorithmType.ACO:
            _require(data, ACO_REQUIRED_FIELDS, "ACO")

        update_strategy = data.get("update_strategy")
        return AlgorithmConfig(
            type=algorithm_type,
            cooling_schedule=cooling_schedule,
            alpha=data.get("alpha"),
            beta=data.get("beta"),
            evap_factor=data.get("evap_factor"),
            ants=data.get("ants"),
            p_best=data.get("p_best"),
            q=data.get("q"),
            nn=data.get("nn"),
            update_strategy=_parse_enum(UpdateStrategy, update_strategy) if update_strategy else None,
        )


@dataclass
class StopCondition:
    max_iterations: int
    optimal_fitness: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none({
            "max_iterations": self.max_iterations,
            "optimal_fitness": self.optimal_fitness,
        })

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> StopCondition:
        return StopCondition(
            max_iterations=int(data["max_iterations"]),
            optimal_fitness=data.get("optimal_fitness"),
        )


@dataclass
class Task:
    algorithm: AlgorithmConfig
    problem: Problem
    stop_cond: Optional[StopCondition] = None
    id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none({
            "id": self.id,
            "algorithm": self.algorithm.to_dict(),
            "problem": self.problem.to_dict(),
            "stop_cond": self.stop_cond.to_dict() if self.stop_cond else None,
        })

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> Task:
        stop_cond = data.get("stop_cond")
        return Task(
            algorithm=AlgorithmConfig.from_dict(data["algorithm"]),
            problem=Problem.from_dict(data["problem"]),
            stop_cond=StopCondition.from_dict(stop_cond) if stop_cond else None,
            id=data.get("id"),
        )


@dataclass
class TaskResult:
    """Final state of one task run."""
    task: Task
    iterations: int
    fitness: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "task": self.task.to_dict(),
            "iterations": self.iterations,
            "fitness": self.fitness,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> TaskResult:
        return TaskResult(
            task=Task.from_dict(data["task"]),
            iterations=int(data["iterations"]),
            fitness=float(data["fitness"]),
        )


@dataclass
class StatusUpdate:
    """Periodic snapshot of a running task. `current_solution` is a bitstring or permutation."""
    iterations: int
    current_fitness: float
    current_solution: str
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            **self.extra,
            "iterations": self.iterations,
            "current_fitness": self.current_fitness,
            "current_solution": self.current_solution,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> StatusUpdate:
        known = ("iterations", "current_fitness", "current_solution")
        return StatusUpdate(
            iterations=int(data["iterations"]),
            current_fitness=float(data["current_fitness"]),
            current_solution=str(data["current_solution"]),
            extra={key: val for key, val in data.items() if key not in known},
        )


# ------------------------------------------------------------------------------
# Labels
# ------------------------------------------------------------------------------
def map_algorithm_name(algorithm: AlgorithmType | str) -> str:
    """Short label of an algorithm. Unknown names are returned unchanged."""
    try:
        return ALGORITHM_NAMES[AlgorithmType(algorithm)]
    except ValueError:
        return str(algorithm)


def task_to_text(task: Task) -> str:
    """
    One-line description of a task, e.g. "SA (c = 0.99) - OneMax (n = 100)".
    """
    algorithm = task.algorithm
    problem = task.problem
    result = map_algorithm_name(algorithm.type)

    match algorithm.type:
        case AlgorithmType.SIMULATED_ANNEALING if algorithm.cooling_schedule:
            schedule = algorithm.cooling_schedule
            match schedule.type:
                case CoolingScheduleType.STATIC:
                    result += f" (Fixed T = {_format_number(schedule.temperature)})"
                case CoolingScheduleType.EXPONENTIAL:
                    result += f" (c = {_format_number(schedule.cooling_rate)})"
        case AlgorithmType.ACO:
            alpha = _format_number(algorithm.alpha)
            rho = _format_number(algorithm.evap_factor)
            if problem.type == ProblemType.TSP:
                beta = _format_number(algorithm.beta)
                result += f" (α={alpha} β={beta} ρ={rho} ants={algorithm.ants})"
            else:
                result += f" (α={alpha} ρ={rho} ants={algorithm.ants})"

    result += f" - {problem.type.value}"
    if problem.type.is_bitstring:
        result += f" (n = {problem.bitstring_size})"
    if problem.tsp_name:
        result += f" ({problem.tsp_name})"
    return result


def status_tooltip(update: StatusUpdate) -> str:
    return f"Iteration {update.iterations}: fitness {_format_number(update.current_fitness)}"


def status_to_onion_point(update: StatusUpdate, config: EnvelopeConfig = DEFAULT_CONFIG) -> Point:
    """
    Place the current bitstring solution of a status update in view space.

    Raises:
        ValueError: If the solution is not a bitstring.
    """
    point = project_to_view(update.current_solution, status_tooltip(update), config)
    logger.debug(f"Projected solution at iteration {update.iterations} to ({point.x:.2f}, {point.y:.2f}).")
    return point
