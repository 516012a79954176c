from hotels.services.eligibility import EligibilityGate, EligibilityResult
from hotels.services.hotel_service import HotelService

__all__ = ["EligibilityGate", "EligibilityResult", "HotelService"]
