"""Worked solutions to the exercise topics."""