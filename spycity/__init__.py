"""City simulation of spies, officers and citizens, with a curses monitor and a clock."""

__version__ = "0.2.0"