from .seat_inventory_factory import SeatInventoryFactory as SeatInventoryFactory
