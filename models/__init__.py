from models.event import Event, StayInterval, CHECK_IN, CHECK_OUT
from models.stats import Stats, PeriodStats
from models.calendar import CalendarPolicy, ISO_POLICY
