"""Threaded dining philosophers simulation with a supervising watcher."""

from __future__ import annotations

import threading
import time
from typing import TextIO

from .args import Settings
from .timing import now_ms, wait_until


class Philosopher:
    """One diner: thinks, takes two forks, eats, sleeps, until told to stop."""

    def __init__(
        self,
        ident: int,
        fork: threading.Lock,
        next_fork: threading.Lock,
        simulation: Simulation,
    ) -> None:
        self.id = ident
        self.fork = fork
        self.next_fork = next_fork
        self.simulation = simulation
        self.meal_lock = threading.Lock()
        self.meal_deadline: int | None = None
        self.meals_eaten = 0
        self.finished = False

    def run(self) -> None:
        """Thread body: wait for the common start, then loop through the cycle."""
        sim = self.simulation
        with sim.start_lock:
            pass
        if not wait_until(sim.start_time):
            return
        while not sim.stopped:
            sim.report(self, "is thinking")
            held = self._grab_forks()
            if not held:
                return
            try:
                done = self._eat()
            finally:
                for lock in reversed(held):
                    lock.release()
            if done or sim.stopped:
                return
            sim.report(self, "is sleeping")
            sim.pause(sim.settings.time_to_sleep)

    def _acquire(self, lock: threading.Lock) -> bool:
        while not self.simulation.stopped:
            if lock.acquire(timeout=0.005):
                return True
        return False

    def _grab_forks(self) -> list[threading.Lock]:
        if self.fork is self.next_fork:
            # A lone philosopher holds the only fork until the simulation ends.
            if self._acquire(self.fork):
                self.simulation.wait_for_stop()
                self.fork.release()
            return []
        if self.id % 2 == 0:
            order = (self.fork, self.next_fork)
        else:
            order = (self.next_fork, self.fork)
        held: list[threading.Lock] = []
        for lock in order:
            if not self._acquire(lock):
                for taken in reversed(held):
                    taken.release()
                return []
            held.append(lock)
        return held

    def _eat(self) -> bool:
        """Eat one meal; return True when this philosopher is done for good."""
        sim = self.simulation
        now = now_ms()
        with self.meal_lock:
            deadline = self.meal_deadline
            if deadline is not None and deadline < now:
                dead = True
            else:
                dead = False
                self.meal_deadline = None
        if dead:
            sim.declare_death(self)
            return True
        sim.report(self, "is eating")
        sim.pause(sim.settings.time_to_eat)
        self.meals_eaten += 1
        if self.meals_eaten == sim.settings.meals_required:
            with self.meal_lock:
                self.finished = True
            return True
        with self.meal_lock:
            self.meal_deadline = now_ms() + sim.settings.time_to_die
        return False


class Simulation:
    """Owns the forks, the philosophers and the shared state they report through."""

    def __init__(self, settings: Settings, out: TextIO) -> None:
        self.settings = settings
        self.out = out
        self.print_lock = threading.Lock()
        self.start_lock = threading.Lock()
        self.start_time: int | None = None
        self.died: int | None = None
        self._stop = threading.Event()
        count = settings.philosophers
        forks = [threading.Lock() for _ in range(count)]
        self.philosophers = [
            Philosopher(i + 1, forks[i], forks[(i + 1) % count], self)
            for i in range(count)
        ]

    @property
    def stopped(self) -> bool:
        return self._stop.is_set()

    def pause(self, milliseconds: int) -> None:
        """Sleep for the given time, waking early if the simulation stops."""
        self._stop.wait(milliseconds / 1000)

    def wait_for_stop(self) -> None:
        self._stop.wait()

    def _stamp(self) -> int:
        start = self.start_time if self.start_time is not None else 0
        return now_ms() - start

    def report(self, philosopher: Philosopher, message: str) -> None:
        """Print a status line unless a death has already been announced."""
        with self.print_lock:
            if self.died is not None:
                return
            self.out.write(f"{self._stamp()} {philosopher.id} {message}\n")
            self.out.flush()

    def declare_death(self, philosopher: Philosopher) -> None:
        """Announce a death once and stop every philosopher."""
        with self.print_lock:
            if self.died is not None:
                return
            self.died = philosopher.id
            self.out.write(f"{self._stamp()} {philosopher.id} died\n")
            self.out.flush()
            self._stop.set()

    def run(self) -> int | None:
        """Run to completion; return the id of the philosopher who died, if any."""
        count = len(self.philosophers)
        threads: list[threading.Thread] = []
        self.start_lock.acquire()
        try:
            for philosopher in self.philosophers:
                thread = threading.Thread(target=philosopher.run, daemon=True)
                thread.start()
                threads.append(thread)
        except RuntimeError:
            self.start_time = None
            self.start_lock.release()
            for thread in threads:
                thread.join()
            raise
        self.start_time = now_ms() + 60 + count * 2
        for philosopher in self.philosophers:
            philosopher.meal_deadline = self.start_time + self.settings.time_to_die
        self.start_lock.release()
        wait_until(self.start_time)
        self._watch()
        self._stop.set()
        for thread in threads:
            thread.join()
        return self.died

    def _watch(self) -> None:
        finished: set[int] = set()
        while len(finished) < len(self.philosophers) and not self.stopped:
            for philosopher in self.philosophers:
                if philosopher.id in finished:
                    continue
                with philosopher.meal_lock:
                    deadline = philosopher.meal_deadline
                    done = philosopher.finished
                if done:
                    finished.add(philosopher.id)
                    continue
                if deadline is None:
                    continue
                if now_ms() > deadline:
                    self.declare_death(philosopher)
                    return
            time.sleep(0.0005)


def run_simulation(settings: Settings, out: TextIO) -> int | None:
    """Run a simulation writing to ``out``; return the id of a dead philosopher or None."""
    return Simulation(settings, out).run()