from .commission_percent import CommissionPercent as CommissionPercent
from .currency import Currency as Currency
from .email_address import EmailAddress as EmailAddress
from .iso_date_time import IsoDateTime as IsoDateTime
from .money import Money as Money
from .trip_date import TripDate as TripDate
