"""Design pattern compliance tests package.

This package contains tests that check the Strategy, Factory Method and
Facade implementations follow their pattern's structure.
"""
