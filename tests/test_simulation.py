import io

from philodine.args import Settings
from philodine.simulation import Simulation, run_simulation
from philodine.timing import now_ms


def _lines(buffer):
    return [line.split(" ", 2) for line in buffer.getvalue().splitlines()]


def test_forks_are_shared_with_neighbour():
    sim = Simulation(Settings(3, 800, 200, 200), io.StringIO())
    philosophers = sim.philosophers
    assert [p.id for p in philosophers] == [1, 2, 3]
    for index, philosopher in enumerate(philosophers):
        neighbour = philosophers[(index + 1) % len(philosophers)]
        assert philosopher.next_fork is neighbour.fork


def test_single_philosopher_dies():
    out = io.StringIO()
    died = run_simulation(Settings(1, 100, 50, 50), out)
    assert died == 1
    lines = out.getvalue().splitlines()
    assert lines[-1].endswith(" 1 died")
    assert sum(line.endswith("died") for line in lines) == 1


def test_everyone_eats_required_meals():
    out = io.StringIO()
    sim = Simulation(Settings(4, 800, 50, 50, 2), out)
    assert sim.run() is None
    assert all(p.meals_eaten == 2 for p in sim.philosophers)
    eating = [parts[1] for parts in _lines(out) if parts[2] == "is eating"]
    for ident in ("1", "2", "3", "4"):
        assert eating.count(ident) == 2
    assert "died" not in out.getvalue()


def test_starvation_is_detected():
    out = io.StringIO()
    died = run_simulation(Settings(2, 50, 200, 50), out)
    assert died in (1, 2)
    assert out.getvalue().splitlines()[-1].endswith(f" {died} died")


def test_timestamps_never_decrease():
    out = io.StringIO()
    run_simulation(Settings(3, 600, 30, 30, 2), out)
    stamps = [int(parts[0]) for parts in _lines(out)]
    assert stamps
    assert stamps == sorted(stamps)
    assert stamps[0] >= 0


def test_declare_death_only_once():
    out = io.StringIO()
    sim = Simulation(Settings(2, 800, 200, 200), out)
    sim.start_time = now_ms()
    sim.declare_death(sim.philosophers[1])
    sim.declare_death(sim.philosophers[0])
    sim.report(sim.philosophers[0], "is thinking")
    lines = out.getvalue().splitlines()
    assert len(lines) == 1
    assert lines[0].endswith(" 2 died")
    assert sim.died == 2
    assert sim.stopped is True


def test_no_philosophers_finishes_immediately():
    out = io.StringIO()
    assert run_simulation(Settings(0, 100, 50, 50), out) is None
    assert out.getvalue() == ""