import pytest

from onionplot.model.task import (
    AlgorithmType,
    CoolingScheduleType,
    ProblemType,
    StatusUpdate,
    Task,
    TaskResult,
    UpdateStrategy,
    map_algorithm_name,
    status_to_onion_point,
    task_to_text,
)


def make_task(algorithm, problem):
    return Task.from_dict({
        "algorithm": algorithm,
        "problem": problem,
        "stop_cond": {"max_iterations": 1000},
    })


ONE_MAX = {"type": "OneMax", "bitstring_size": 100}
LEADING_ONES = {"type": "LeadingOnes", "bitstring_size": 50}
BERLIN = {"type": "TSP", "tsp_instance": "...", "tsp_name": "berlin52"}
ACO = {
    "type": "ACO", "alpha": 1.0, "beta": 2.5, "evap_factor": 0.1, "ants": 10,
    "nn": False, "update_strategy": "BestSoFar",
}


@pytest.mark.parametrize("algorithm, problem, expected", [
    ({"type": "OnePlusOneEA"}, ONE_MAX, "(1+1) EA - OneMax (n = 100)"),
    ({"type": "OnePlusOneEA"}, BERLIN, "(1+1) EA - TSP (berlin52)"),
    (
        {"type": "SimulatedAnnealing", "cooling_schedule": {"type": "Static", "temperature": 2.0}},
        ONE_MAX,
        "SA (Fixed T = 2) - OneMax (n = 100)",
    ),
    (
        {"type": "SimulatedAnnealing", "cooling_schedule": {"type": "Exponential", "cooling_rate": 0.99}},
        LEADING_ONES,
        "SA (c = 0.99) - LeadingOnes (n = 50)",
    ),
    (ACO, BERLIN, "ACO (α=1 β=2.5 ρ=0.1 ants=10) - TSP (berlin52)"),
    (ACO, ONE_MAX, "ACO (α=1 ρ=0.1 ants=10) - OneMax (n = 100)"),
])
def test_task_to_text(algorithm, problem, expected):
    assert task_to_text(make_task(algorithm, problem)) == expected


def test_from_dict_builds_enums():
    task = make_task(ACO, BERLIN)
    assert task.algorithm.type is AlgorithmType.ACO
    assert task.algorithm.update_strategy is UpdateStrategy.BEST_SO_FAR
    assert task.problem.type is ProblemType.TSP
    assert task.stop_cond.max_iterations == 1000
    assert task.stop_cond.optimal_fitness is None


def test_task_dict_round_trip():
    data = {
        "id": "a1",
        "algorithm": {"type": "SimulatedAnnealing", "cooling_schedule": {"type": "Static", "temperature": 3.0}},
        "problem": {"type": "OneMax", "bitstring_size": 10},
        "stop_cond": {"max_iterations": 500, "optimal_fitness": 10.0},
    }
    task = Task.from_dict(data)
    assert task.algorithm.cooling_schedule.type is CoolingScheduleType.STATIC
    assert task.to_dict() == data


def test_task_result_from_dict():
    result = TaskResult.from_dict({
        "task": {"algorithm": {"type": "OnePlusOneEA"}, "problem": ONE_MAX},
        "iterations": 1234,
        "fitness": 100,
    })
    assert result.iterations == 1234
    assert result.fitness == 100.0
    assert result.task.stop_cond is None


@pytest.mark.parametrize("algorithm, problem", [
    ({"type": "Genetic"}, ONE_MAX),
    ({"type": "OnePlusOneEA"}, {"type": "Knapsack"}),
    ({"type": "OnePlusOneEA"}, {"type": "OneMax"}),
    ({"type": "SimulatedAnnealing"}, ONE_MAX),
    ({"type": "SimulatedAnnealing", "cooling_schedule": {"type": "Linear"}}, ONE_MAX),
    ({**ACO, "update_strategy": "Random"}, BERLIN),
    ({"type": "SimulatedAnnealing", "cooling_schedule": {"type": "Static"}}, ONE_MAX),
    ({"type": "SimulatedAnnealing", "cooling_schedule": {"type": "Exponential"}}, ONE_MAX),
    ({"type": "SimulatedAnnealing", "cooling_schedule": {"type": "Static", "cooling_rate": 0.9}}, ONE_MAX),
    ({"type": "ACO"}, ONE_MAX),
    ({key: val for key, val in ACO.items() if key != "beta"}, BERLIN),
    ({**ACO, "ants": None}, BERLIN),
])
def test_invalid_task_raises(algorithm, problem):
    with pytest.raises(ValueError):
        make_task(algorithm, problem)


def test_map_algorithm_name():
    assert map_algorithm_name(AlgorithmType.SIMULATED_ANNEALING) == "SA"
    assert map_algorithm_name("OnePlusOneEA") == "(1+1) EA"
    assert map_algorithm_name("Unknown") == "Unknown"


def test_status_to_onion_point():
    update = StatusUpdate.from_dict({
        "iterations": 10,
        "current_fitness": 2.0,
        "current_solution": "1100",
        "pheromones": [0.5],
    })
    assert update.extra == {"pheromones": [0.5]}

    point = status_to_onion_point(update)
    assert point.x == pytest.approx(0.0)
    assert point.y == pytest.approx(50.0)
    assert point.tooltip == "Iteration 10: fitness 2"


def test_status_with_permutation_raises():
    update = StatusUpdate(iterations=1, current_fitness=7542.0, current_solution="0,2,1")
    with pytest.raises(ValueError):
        status_to_onion_point(update)


def test_missing_aco_fields_are_named():
    with pytest.raises(ValueError, match="'alpha', 'beta'"):
        make_task({"type": "ACO", "evap_factor": 0.1, "ants": 5, "nn": True, "update_strategy": "AllAnts"}, ONE_MAX)


def test_aco_optional_fields_may_be_missing():
    task = make_task(ACO, BERLIN)
    assert task.algorithm.p_best is None
    assert task.algorithm.q is None


def test_status_update_to_dict():
    data = {"iterations": 3, "current_fitness": 5.0, "current_solution": "0101", "temperature": 1.5}
    assert StatusUpdate.from_dict(data).to_dict() == data
