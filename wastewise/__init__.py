"""Food-waste management toolkit: pantry intake and waste accounting."""

__version__ = "0.1.0"
