"""Pattern Catalog - Root Package.

This package collects small, self-contained implementations of three
object-oriented design patterns:

    - Strategy: a Context delegating to a swappable transform algorithm
    - Factory Method: Creators that vary the product they build through one hook
    - Facade: one entry point sequencing calls across two subsystems

Key Components:
    - domain: Pattern contexts, ports and exceptions
    - application: Facade and the application service
    - infrastructure: Concrete strategies, registries and logging
    - config: Configuration schemas and management
    - cli: Command-line interface
"""

from ._package import PACKAGE_NAME, __version__

__package_name__ = PACKAGE_NAME
