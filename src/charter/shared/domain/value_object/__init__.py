from .currency import Currency as Currency
from .iso_date_time import IsoDateTime as IsoDateTime
from .money import Money as Money
from .money import round_half_up as round_half_up
