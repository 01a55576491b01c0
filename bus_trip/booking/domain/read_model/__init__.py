from .upcoming_trip import UpcomingTrip as UpcomingTrip
