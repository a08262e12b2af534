"""Degree/radian conversion factors."""
import math

DEG2RAD = math.pi / 180.0
RAD2DEG = 180.0 / math.pi
