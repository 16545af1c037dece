from datetime import datetime, timezone
from errors import InternalError, NotFound
import logging

logger = logging.getLogger(__name__)

# Set by the service, never taken from a payload
_PROTECTED_FIELDS = ("id", "createdAt")


def _check_driver(store, driver_id):
    if not driver_id:
        return
    try:
        driver = store.users.get(driver_id)
    except Exception as e:
        raise InternalError(str(e))
    if not driver or driver.get("role") != "driver":
        raise NotFound("Driver not found")


def add_vehicle(store, vehicle):
    """Store a validated VehicleCreate; fields beyond the known ones are kept as sent."""
    _check_driver(store, vehicle.driverId)
    vehicle_data = {k: v for k, v in vehicle.model_dump().items() if k not in _PROTECTED_FIELDS}
    vehicle_data["createdAt"] = datetime.now(timezone.utc)
    try:
        vehicle_data["id"] = store.vehicles.insert(vehicle_data)
    except Exception as e:
        logger.error(f"Error saving vehicle document: {str(e)}")
        raise InternalError(str(e))
    return vehicle_data


def update_vehicle(store, vehicle_id, changes):
    """Overwrite only the fields present in the VehicleUpdate payload."""
    fields = {**changes.model_dump(exclude_unset=True), **(changes.model_extra or {})}
    fields = {k: v for k, v in fields.items() if k not in _PROTECTED_FIELDS}
    _check_driver(store, fields.get("driverId"))
    try:
        updated = store.vehicles.update(vehicle_id, fields)
    except Exception as e:
        logger.error(f"Error updating vehicle {vehicle_id}: {str(e)}")
        raise InternalError(str(e))
    if not updated:
        raise NotFound("Vehicle not found")


def list_vehicles(store):
    try:
        return store.vehicles.all()
    except Exception as e:
        raise InternalError(str(e))
