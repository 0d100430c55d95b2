"""Integration tests for API endpoints."""

import pytest
from fastapi.testclient import TestClient

from marketplace_api.app.main import create_app


EVENT_DATE = "2026-06-01T15:00:00Z"


class TestWaitlistAPI:
    """Test the waitlist endpoint."""

    def test_join_waitlist(self, client, waitlist_payload):
        response = client.post("/api/waitlist", json=waitlist_payload)

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == 1
        assert data["email"] == "bob@example.com"
        assert data["user_type"] == "provider"
        assert data["receives_updates"] is True
        assert "created_at" in data

    def test_duplicate_email_returns_409(self, client, storage, waitlist_payload):
        client.post("/api/waitlist", json=waitlist_payload)

        response = client.post("/api/waitlist", json={**waitlist_payload, "email": "BOB@example.com"})

        assert response.status_code == 409
        assert response.json()["detail"] == "Email already registered in waitlist"
        assert len(storage.list_waitlist()) == 1

    def test_invalid_user_type_returns_400(self, client, storage, waitlist_payload):
        response = client.post("/api/waitlist", json={**waitlist_payload, "user_type": "admin"})

        assert response.status_code == 400
        body = response.json()
        assert body["detail"] == "Validation error"
        assert body["errors"]
        assert storage.list_waitlist() == []

    def test_missing_email_returns_400(self, client, waitlist_payload):
        payload = dict(waitlist_payload)
        del payload["email"]

        response = client.post("/api/waitlist", json=payload)

        assert response.status_code == 400
        assert any("email" in error["loc"] for error in response.json()["errors"])


class TestUserAPI:
    """Test registration and user lookups."""

    def test_register_user_hides_password(self, client, user_payload):
        response = client.post("/api/users", json=user_payload)

        assert response.status_code == 201
        data = response.json()
        assert data == {
            "id": 1,
            "email": "a@x.com",
            "username": "alice",
            "full_name": "Alice Smith",
            "user_type": "customer",
        }

    def test_duplicate_email_returns_409(self, client, user_payload):
        client.post("/api/users", json=user_payload)

        response = client.post("/api/users", json={**user_payload, "email": "A@X.com", "username": "alice2"})

        assert response.status_code == 409
        assert response.json()["detail"] == "Email already registered"

    def test_duplicate_username_returns_409(self, client, user_payload):
        client.post("/api/users", json=user_payload)

        response = client.post("/api/users", json={**user_payload, "email": "b@x.com", "username": "ALICE"})

        assert response.status_code == 409
        assert response.json()["detail"] == "Username already taken"

    def test_malformed_email_returns_400(self, client, user_payload):
        response = client.post("/api/users", json={**user_payload, "email": "not-an-email"})
        assert response.status_code == 400

    def test_get_user(self, client, user_payload):
        client.post("/api/users", json=user_payload)

        response = client.get("/api/users/1")

        assert response.status_code == 200
        assert response.json()["username"] == "alice"
        assert "password" not in response.json()

    def test_get_missing_user_returns_404(self, client):
        response = client.get("/api/users/5")

        assert response.status_code == 404
        assert response.json()["detail"] == "User not found"

    def test_list_user_businesses(self, client, business_payload):
        client.post("/api/businesses", json=business_payload)
        client.post("/api/businesses", json={**business_payload, "user_id": 2, "name": "Other"})

        response = client.get("/api/users/1/businesses")

        assert response.status_code == 200
        assert [b["name"] for b in response.json()] == ["Foo Photos"]


class TestAuthAPI:
    """Test the login endpoint."""

    def test_login_with_valid_credentials(self, client, user_payload):
        client.post("/api/users", json=user_payload)

        response = client.post("/api/auth/login", json={"email": "A@x.com", "password": "secret"})

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["user"]["id"] == 1
        assert "password" not in data["user"]

    @pytest.mark.parametrize("email,password", [
        ("a@x.com", "wrong"),
        ("nobody@x.com", "secret"),
    ])
    def test_login_rejects_bad_credentials(self, client, user_payload, email, password):
        client.post("/api/users", json=user_payload)

        response = client.post("/api/auth/login", json={"email": email, "password": password})

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid credentials"


class TestBusinessAPI:
    """Test business profile endpoints."""

    def test_create_business(self, client, business_payload):
        response = client.post("/api/businesses", json=business_payload)

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == 1
        assert data["name"] == "Foo Photos"
        assert data["portfolio"] is None

    def test_rating_out_of_range_returns_400(self, client, business_payload):
        response = client.post("/api/businesses", json={**business_payload, "rating": 6})
        assert response.status_code == 400

    def test_list_with_category_filter(self, client, business_payload):
        client.post("/api/businesses", json=business_payload)
        client.post("/api/businesses", json={**business_payload, "name": "Tasty", "category": "Catering"})

        all_response = client.get("/api/businesses")
        filtered = client.get("/api/businesses", params={"category": "CATERING"})

        assert all_response.status_code == 200
        assert len(all_response.json()) == 2
        assert [b["name"] for b in filtered.json()] == ["Tasty"]

    def test_get_business(self, client, business_payload):
        client.post("/api/businesses", json=business_payload)

        response = client.get("/api/businesses/1")

        assert response.status_code == 200
        assert response.json()["category"] == "Photography"

    def test_get_missing_business_returns_404(self, client):
        response = client.get("/api/businesses/1")

        assert response.status_code == 404
        assert response.json()["detail"] == "Business not found"

    def test_non_numeric_id_returns_400(self, client):
        response = client.get("/api/businesses/abc")
        assert response.status_code == 400


class TestBookingAPI:
    """Test booking endpoints."""

    def test_create_booking_defaults_to_pending(self, client):
        response = client.post("/api/bookings", json={
            "customer_id": 1,
            "business_id": 1,
            "event_date": EVENT_DATE,
            "details": "Wedding, 120 guests",
        })

        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "pending"
        assert data["details"] == "Wedding, 120 guests"
        assert data["event_date"].startswith("2026-06-01T15:00:00")

    def test_missing_event_date_returns_400(self, client):
        response = client.post("/api/bookings", json={"customer_id": 1, "business_id": 1})
        assert response.status_code == 400

    def test_list_user_and_business_bookings(self, client):
        client.post("/api/bookings", json={"customer_id": 1, "business_id": 1, "event_date": EVENT_DATE})
        client.post("/api/bookings", json={"customer_id": 2, "business_id": 1, "event_date": EVENT_DATE})

        assert len(client.get("/api/users/1/bookings").json()) == 1
        assert len(client.get("/api/businesses/1/bookings").json()) == 2
        assert client.get("/api/businesses/2/bookings").json() == []

    def test_get_booking(self, client):
        client.post("/api/bookings", json={"customer_id": 1, "business_id": 1, "event_date": EVENT_DATE})

        assert client.get("/api/bookings/1").status_code == 200
        assert client.get("/api/bookings/2").status_code == 404

    def test_update_status(self, client):
        client.post("/api/bookings", json={"customer_id": 1, "business_id": 1, "event_date": EVENT_DATE})

        response = client.patch("/api/bookings/1/status", json={"status": "confirmed"})

        assert response.status_code == 200
        assert response.json()["status"] == "confirmed"

    @pytest.mark.parametrize("body", [{"status": "archived"}, {"status": ""}, {}])
    def test_invalid_status_returns_400(self, client, body):
        client.post("/api/bookings", json={"customer_id": 1, "business_id": 1, "event_date": EVENT_DATE})

        response = client.patch("/api/bookings/1/status", json=body)

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid status value"

    def test_update_missing_booking_returns_404(self, client):
        response = client.patch("/api/bookings/7/status", json={"status": "cancelled"})

        assert response.status_code == 404
        assert response.json()["detail"] == "Booking not found"


class TestMessageAPI:
    """Test messaging endpoints."""

    def test_send_message_ignores_is_read(self, client):
        response = client.post("/api/messages", json={
            "sender_id": 1,
            "receiver_id": 2,
            "content": "Are you free in June?",
            "is_read": True,
        })

        assert response.status_code == 201
        data = response.json()
        assert data["is_read"] is False
        assert data["booking_id"] is None
        assert "sent_at" in data

    def test_conversation_same_from_both_sides(self, client):
        client.post("/api/messages", json={"sender_id": 1, "receiver_id": 2, "content": "one"})
        client.post("/api/messages", json={"sender_id": 2, "receiver_id": 1, "content": "two"})
        client.post("/api/messages", json={"sender_id": 3, "receiver_id": 1, "content": "other"})

        forward = client.get("/api/messages/1/2").json()
        backward = client.get("/api/messages/2/1").json()

        assert [m["content"] for m in forward] == ["one", "two"]
        assert backward == forward

    def test_missing_content_returns_400(self, client):
        response = client.post("/api/messages", json={"sender_id": 1, "receiver_id": 2})
        assert response.status_code == 400


class TestReviewAPI:
    """Test review endpoints."""

    def test_create_and_list_reviews(self, client):
        response = client.post("/api/reviews", json={
            "booking_id": 1,
            "customer_id": 1,
            "business_id": 1,
            "rating": 5,
            "comment": "Stunning photos",
        })

        assert response.status_code == 201
        assert response.json()["rating"] == 5

        reviews = client.get("/api/businesses/1/reviews").json()
        assert [r["comment"] for r in reviews] == ["Stunning photos"]

    def test_long_comment_is_stored_unchanged(self, client):
        comment = "  " + "x" * 1500 + "  "
        response = client.post("/api/reviews", json={
            "booking_id": 1, "customer_id": 1, "business_id": 1, "rating": 4, "comment": comment,
        })

        assert response.status_code == 201
        assert response.json()["comment"] == comment
        assert client.get("/api/businesses/1/reviews").json()[0]["comment"] == comment

    @pytest.mark.parametrize("rating", [0, 6])
    def test_rating_out_of_range_returns_400(self, client, rating):
        response = client.post("/api/reviews", json={
            "booking_id": 1, "customer_id": 1, "business_id": 1, "rating": rating,
        })
        assert response.status_code == 400


class TestErrorHandling:
    """Test generic error mapping."""

    def test_unexpected_error_returns_500(self, storage, monkeypatch):
        def boom(category=None):
            raise RuntimeError("store exploded")

        monkeypatch.setattr(storage, "list_businesses", boom)
        client = TestClient(create_app(storage=storage), raise_server_exceptions=False)

        response = client.get("/api/businesses")

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}

    def test_health(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestScenario:
    """Full booking flow over HTTP."""

    def test_register_book_and_confirm(self, client, user_payload, business_payload):
        first = client.post("/api/users", json=user_payload)
        assert first.status_code == 201
        assert first.json()["id"] == 1

        duplicate = client.post("/api/users", json={**user_payload, "email": "A@X.com", "username": "alice2"})
        assert duplicate.status_code == 409

        business = client.post("/api/businesses", json=business_payload)
        assert business.json()["id"] == 1

        booking = client.post("/api/bookings", json={"customer_id": 1, "business_id": 1, "event_date": EVENT_DATE})
        assert booking.json()["status"] == "pending"

        confirmed = client.patch(f"/api/bookings/{booking.json()['id']}/status", json={"status": "confirmed"})
        assert confirmed.json()["status"] == "confirmed"

        bookings = client.get("/api/businesses/1/bookings").json()
        assert len(bookings) == 1
        assert bookings[0]["status"] == "confirmed"
