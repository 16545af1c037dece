from datetime import datetime, timezone
from errors import InternalError, NotFound
import logging

logger = logging.getLogger(__name__)


def create_booking(store, customer_id, details):
    """Create a pending booking owned by customer_id.

    The customer's name and phone are copied onto the booking as they are now
    and are not kept in sync with later changes to the user.
    """
    try:
        customer = store.users.get(customer_id)
    except Exception as e:
        logger.error(f"Error loading customer {customer_id}: {str(e)}")
        raise InternalError(str(e))
    if not customer:
        raise NotFound("User not found")

    booking_data = {
        "customerId": customer["id"],
        "customerName": customer.get("name"),
        "customerPhone": customer.get("phoneNumber"),
        "vehicleId": details.vehicleId,
        "vehicleType": details.vehicleType,
        "fromLocation": details.fromLocation,
        "toLocation": details.toLocation,
        "travelDate": details.travelDate,
        "amount": details.amount,
        "status": "pending",
        "createdAt": datetime.now(timezone.utc),
    }
    try:
        booking_data["id"] = store.bookings.insert(booking_data)
    except Exception as e:
        logger.error(f"Error saving booking document: {str(e)}")
        raise InternalError(str(e))
    return booking_data


def find_bookings(store, **equals):
    """All bookings, or those whose fields equal the given values."""
    try:
        if equals:
            return store.bookings.find(**equals)
        return store.bookings.all()
    except Exception as e:
        logger.error(f"Error fetching bookings: {str(e)}")
        raise InternalError(str(e))


def update_booking_status(store, booking_id, status):
    # Any status may replace any other
    try:
        updated = store.bookings.update(booking_id, {"status": status})
    except Exception as e:
        logger.error(f"Error updating booking {booking_id}: {str(e)}")
        raise InternalError(str(e))
    if not updated:
        raise NotFound("Booking not found")


def revenue_summary(store):
    completed = find_bookings(store, status="completed")
    total = sum(b.get("amount") or 0 for b in completed)
    return {
        "totalCompletedTrips": len(completed),
        "totalRevenue": total,
    }
