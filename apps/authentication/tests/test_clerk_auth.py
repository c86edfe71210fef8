"""Tests for Clerk token authentication."""

from __future__ import annotations

from unittest.mock import patch

import jwt
from django.test import TestCase, override_settings
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.authentication.models import User
from apps.authentication.services.clerk_service import ClerkService, clerk_service
from apps.clinics.models import Clinic
from apps.core.utils.constants import USER_ROLE_CLINIC_OWNER, USER_ROLE_PATIENT


def make_token(sub: str, **claims) -> str:
    payload = {"sub": sub, "azp": "http://localhost:3000", **claims}
    return jwt.encode(payload, "unused-secret", algorithm="HS256")


def clerk_user_payload(user_id: str, email: str, role: str = USER_ROLE_CLINIC_OWNER) -> dict:
    return {
        "id": user_id,
        "first_name": "Anna",
        "last_name": "Kowalska",
        "primary_email_address_id": "idn_1",
        "email_addresses": [
            {"id": "idn_1", "email_address": email, "verification": {"status": "verified"}},
        ],
        "public_metadata": {"role": role},
        "unsafe_metadata": {},
    }


class ClerkServiceTests(TestCase):
    def test_sync_user_data_maps_clerk_payload(self) -> None:
        data = clerk_service.sync_user_data(clerk_user_payload("user_1", "anna@clinic.pl"))

        self.assertEqual(data["clerk_user_id"], "user_1")
        self.assertEqual(data["email"], "anna@clinic.pl")
        self.assertEqual(data["role"], USER_ROLE_CLINIC_OWNER)
        self.assertTrue(data["email_verified"])

    def test_unknown_role_defaults_to_patient(self) -> None:
        data = clerk_service.sync_user_data(clerk_user_payload("user_1", "a@b.pl", role="admin"))

        self.assertEqual(data["role"], USER_ROLE_PATIENT)

    def test_verify_token_rejects_garbage(self) -> None:
        self.assertIsNone(clerk_service.verify_token("not-a-jwt"))

    @override_settings(CLERK_JWT_KEY="", CLERK_ALLOW_UNVERIFIED_TOKENS=False)
    def test_unsigned_token_rejected_without_jwt_key(self) -> None:
        service = ClerkService()

        self.assertIsNone(service.verify_token(make_token("user_owner")))

    @override_settings(CLERK_JWT_KEY="", CLERK_ALLOW_UNVERIFIED_TOKENS=True)
    def test_unsigned_token_accepted_when_explicitly_allowed(self) -> None:
        service = ClerkService()

        self.assertEqual(service.verify_token(make_token("user_owner"))["sub"], "user_owner")


class ClerkSessionMiddlewareTests(TestCase):
    def setUp(self) -> None:
        self.url = reverse("bookings:clinic-bookings")

    @patch("apps.authentication.middleware.clerk_service.get_user")
    def test_session_cookie_authenticates_page_request(self, get_user) -> None:
        get_user.return_value = clerk_user_payload("user_owner", "owner@clinic.pl")
        self.client.cookies["__session"] = make_token("user_owner")

        response = self.client.get(self.url)

        # Authenticated, first sight creates the user; no clinic yet
        self.assertEqual(response.status_code, 404)
        user = User.objects.get(clerk_user_id="user_owner")
        self.assertEqual(user.email, "owner@clinic.pl")
        self.assertEqual(user.role, USER_ROLE_CLINIC_OWNER)

    @patch("apps.authentication.middleware.clerk_service.get_user")
    def test_existing_user_with_clinic_sees_dashboard(self, get_user) -> None:
        user = User.objects.create_user(email="owner@clinic.pl", clerk_user_id="user_owner")
        Clinic.objects.create(user=user, name="Centrum")
        get_user.return_value = clerk_user_payload("user_owner", "owner@clinic.pl")
        self.client.cookies["__session"] = make_token("user_owner")

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, 200)
        user.refresh_from_db()
        self.assertEqual(user.role, USER_ROLE_CLINIC_OWNER)

    @patch("apps.authentication.middleware.clerk_service.get_user")
    def test_forged_cookie_cannot_open_another_owners_clinic(self, get_user) -> None:
        victim = User.objects.create_user(email="victim@clinic.pl", clerk_user_id="user_victim")
        Clinic.objects.create(user=victim, name="Centrum")
        get_user.return_value = clerk_user_payload("user_victim", "victim@clinic.pl")
        self.client.cookies["__session"] = make_token("user_victim")

        with patch.object(clerk_service, "allow_unverified", False):
            response = self.client.get(self.url)

        self.assertEqual(response.status_code, 302)

    def test_invalid_cookie_falls_back_to_anonymous(self) -> None:
        self.client.cookies["__session"] = "garbage"

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, 302)

    @patch("apps.authentication.middleware.clerk_service.get_user", return_value=None)
    def test_unknown_clerk_user_is_anonymous(self, _get_user) -> None:
        self.client.cookies["__session"] = make_token("user_ghost")

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, 302)
        self.assertFalse(User.objects.filter(clerk_user_id="user_ghost").exists())


class ClerkBearerAPITests(APITestCase):
    @patch("apps.authentication.middleware.clerk_service.get_user")
    def test_bearer_token_authenticates_api(self, get_user) -> None:
        get_user.return_value = clerk_user_payload("user_owner", "owner@clinic.pl")
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {make_token('user_owner')}")

        response = self.client.get(reverse("current-user"))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["email"], "owner@clinic.pl")
        self.assertIsNone(response.data["clinic_id"])

    def test_current_user_reports_clinic(self) -> None:
        user = User.objects.create_user(email="owner@clinic.pl", role=USER_ROLE_CLINIC_OWNER)
        clinic = Clinic.objects.create(user=user, name="Centrum")
        self.client.force_authenticate(user)

        response = self.client.get(reverse("current-user"))

        self.assertEqual(response.data["clinic_id"], str(clinic.id))

    @patch("apps.authentication.middleware.clerk_service.get_user", return_value=None)
    def test_token_without_azp_claim_is_rejected(self, _get_user) -> None:
        token = jwt.encode({"sub": "user_owner"}, "unused-secret", algorithm="HS256")
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")

        response = self.client.get(reverse("current-user"))

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_health_check_is_public(self) -> None:
        response = self.client.get(reverse("health-check"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["database"], "healthy")
