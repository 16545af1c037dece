import pytest

from models import ROLES

ENDPOINTS = [
    ("post", "/book", {"fromLocation": "Chennai", "toLocation": "Madurai"}, {"customer"}),
    ("get", "/my-bookings", None, {"customer"}),
    ("get", "/admin/bookings", None, {"admin", "director"}),
    ("put", "/admin/update-status/missing", {"status": "approved"}, {"admin", "director"}),
    ("get", "/admin/search/9990001111", None, {"admin", "director"}),
    ("post", "/director/create-admin", {"name": "A", "phoneNumber": "777", "password": "pw"}, {"director"}),
    ("post", "/director/create-driver", {"name": "D", "phoneNumber": "888", "password": "pw"}, {"director"}),
    ("post", "/director/add-vehicle", {"vehicleNumber": "TN01", "type": "bus"}, {"director"}),
    ("put", "/director/update-vehicle/missing", {"status": "maintenance"}, {"director"}),
    ("get", "/director/revenue", None, {"director"}),
    ("get", "/director/all-users", None, {"director"}),
    ("put", "/director/toggle-user/missing", None, {"director"}),
    ("get", "/director/vehicles", None, {"director"}),
]

CASES = [
    (method, path, body, role, role in allowed)
    for method, path, body, allowed in ENDPOINTS
    for role in ROLES
]


def _call(client, method, path, body, headers=None):
    kwargs = {"headers": headers or {}}
    if body is not None:
        kwargs["json"] = body
    return getattr(client, method)(path, **kwargs)


@pytest.mark.parametrize("method,path,body,role,allowed", CASES)
def test_role_matrix(client, headers_for, method, path, body, role, allowed):
    response = _call(client, method, path, body, headers_for(role))
    if allowed:
        assert response.status_code not in (401, 403), response.json()
    else:
        assert response.status_code == 403
        assert response.json() == {"error": "Access Denied"}


@pytest.mark.parametrize("method,path,body,allowed", ENDPOINTS)
def test_protected_routes_require_header(client, method, path, body, allowed):
    response = _call(client, method, path, body)
    assert response.status_code == 401
    assert response.json() == {"error": "Invalid JWT"}
    assert response.headers["WWW-Authenticate"] == "Bearer"


def test_forbidden_request_never_reaches_handler(client, store, headers_for):
    headers = headers_for("customer")
    store.bookings.calls.clear()

    response = client.get("/admin/bookings", headers=headers)

    assert response.status_code == 403
    assert store.bookings.calls == []


def test_forbidden_status_update_leaves_booking_untouched(client, store, make_user, auth_headers):
    customer = make_user("customer")
    booking_id = store.bookings.insert({"customerId": customer["id"], "status": "pending"})

    response = client.put(
        f"/admin/update-status/{booking_id}",
        json={"status": "completed"},
        headers=auth_headers(customer),
    )

    assert response.status_code == 403
    assert store.bookings.get(booking_id)["status"] == "pending"


def test_unauthenticated_add_vehicle_has_no_side_effect(client, store):
    response = client.post(
        "/director/add-vehicle",
        json={"vehicleNumber": "TN01", "type": "bus"},
        headers={"Authorization": "Bearer not-a-token"},
    )
    assert response.status_code == 401
    assert response.json() == {"error": "Invalid Token"}
    assert store.vehicles.docs == {}
