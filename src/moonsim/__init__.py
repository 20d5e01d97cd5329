"""
moonsim: integer moon-gravity simulator and recurrence finder

A small discrete dynamical system: moons pull on each other one unit per
axis per tick, and the whole system eventually returns to where it started.

Core concepts:
- Each pair of moons nudges velocities by ±1 per axis, every tick
- Positions then advance by velocity
- Energy = Σ potential × kinetic (Manhattan magnitudes)
- The axes never interact, so each axis has its own period
- The full period is the LCM of the three axis periods
"""

__version__ = "0.1.0"
