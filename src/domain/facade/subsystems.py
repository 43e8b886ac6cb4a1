"""Subsystems the Facade coordinates.

Each subsystem is usable on its own; the Facade only sequences their calls.
"""


class Subsystem1:
    def operation1(self) -> str:
        return "Subsystem1: Ready!\n"

    def operation_n(self) -> str:
        return "Subsystem1: Go!\n"


class Subsystem2:
    def operation1(self) -> str:
        return "Subsystem2: Get ready!\n"

    def operation_z(self) -> str:
        return "Subsystem2: Fire!"
