"""Mini README: Mission-side orchestration around the coverage planner.

The ``flight_plans`` module is the in-process caller that the mission
service invokes: it validates the survey boundary, generates the waypoint
path and computes the distance and duration stored with the flight path.
"""

from .flight_plans import FlightPlan, FlightPlanService

__all__ = ["FlightPlan", "FlightPlanService"]
