"""Drop-in agent actions; each module exports ``ACTION = ActionSpec(...)``."""
