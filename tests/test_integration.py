"""Integration tests for complete workflows."""
from tests.conftest import client, caller, ADMIN_HEADERS

OWNER = "0xOwner000000000000000000000000000000000001"
GRANTEE_B = "0xB0b0000000000000000000000000000000000002"
STRANGER_C = "0xC4a0000000000000000000000000000000000003"


def purchase(policy_id, limit, payment, owner=OWNER):
    return client.post(
        f"/policies/{policy_id}/purchase",
        json={"limit": limit, "payment": payment},
        headers=caller(owner)
    )


def policy_count():
    return client.get("/policies/count").json()["total_policies"]


def audit_events(policy_id, event_type=None):
    params = {"policy_id": policy_id}
    if event_type:
        params["event_type"] = event_type
    response = client.get("/audit/events", params=params, headers=ADMIN_HEADERS)
    assert response.status_code == 200
    return response.json()


class TestIntegrationWorkflows:
    """Test complete end-to-end workflows."""

    def test_limit_grant_scenario(self):
        """Owner buys policy 123, grants limit to B; B reads limit only, C reads nothing."""
        response = purchase(123, limit=1000, payment=500)
        assert response.status_code == 200
        assert response.json() == {"success": True, "policy_id": 123}

        response = client.post(
            "/policies/123/grants/limit",
            json={"grantee": GRANTEE_B},
            headers=caller(OWNER)
        )
        assert response.status_code == 200
        assert response.json()["success"] == True

        response = client.get("/policies/123/limit", headers=caller(GRANTEE_B))
        assert response.status_code == 200
        assert response.json() == {"policy_id": 123, "field": "limit", "value": 1000}

        response = client.get("/policies/123/premium", headers=caller(GRANTEE_B))
        assert response.status_code == 403
        assert response.json()["error"] == "AccessDenied"

        response = client.get("/policies/123/limit", headers=caller(STRANGER_C))
        assert response.status_code == 403
        assert response.json()["error"] == "AccessDenied"

    def test_premium_grant_reads_premium(self):
        purchase(200, limit=5000, payment=250)
        client.post("/policies/200/grants/premium", json={"grantee": GRANTEE_B}, headers=caller(OWNER))

        response = client.get("/policies/200/premium", headers=caller(GRANTEE_B))
        assert response.status_code == 200
        assert response.json()["value"] == 250

        response = client.get("/policies/200/limit", headers=caller(GRANTEE_B))
        assert response.status_code == 403

    def test_regrant_overwrites_previous_field(self):
        """Premium then limit leaves only the limit grant active."""
        purchase(300, limit=700, payment=70)
        client.post("/policies/300/grants/premium", json={"grantee": GRANTEE_B}, headers=caller(OWNER))
        client.post("/policies/300/grants/limit", json={"grantee": GRANTEE_B}, headers=caller(OWNER))

        assert client.get("/policies/300/premium", headers=caller(GRANTEE_B)).status_code == 403
        response = client.get("/policies/300/limit", headers=caller(GRANTEE_B))
        assert response.status_code == 200
        assert response.json()["value"] == 700

    def test_generic_grant_endpoint(self):
        purchase(350, limit=10, payment=1)
        response = client.post(
            "/policies/350/grants",
            json={"grantee": GRANTEE_B, "field": "premium"},
            headers=caller(OWNER)
        )
        assert response.status_code == 200
        assert client.get("/policies/350/premium", headers=caller(GRANTEE_B)).json()["value"] == 1

    def test_regrant_same_field_is_idempotent(self):
        purchase(360, limit=42, payment=4)
        for _ in range(2):
            response = client.post("/policies/360/grants/limit", json={"grantee": GRANTEE_B}, headers=caller(OWNER))
            assert response.status_code == 200
        assert client.get("/policies/360/limit", headers=caller(GRANTEE_B)).json()["value"] == 42

    def test_repurchase_resets_grants(self):
        """Re-purchasing under the same identifier drops every earlier grant."""
        purchase(400, limit=1000, payment=500)
        client.post("/policies/400/grants/limit", json={"grantee": GRANTEE_B}, headers=caller(OWNER))
        assert client.get("/policies/400/limit", headers=caller(GRANTEE_B)).status_code == 200

        response = purchase(400, limit=2000, payment=800, owner=STRANGER_C)
        assert response.status_code == 200

        assert client.get("/policies/400/limit", headers=caller(GRANTEE_B)).status_code == 403

        client.post("/policies/400/grants/limit", json={"grantee": GRANTEE_B}, headers=caller(STRANGER_C))
        assert client.get("/policies/400/limit", headers=caller(GRANTEE_B)).json()["value"] == 2000

    def test_purchase_increments_count(self):
        before = policy_count()
        purchase(500, limit=1, payment=1)
        assert policy_count() == before + 1

        # Re-purchase counts as another purchase
        purchase(500, limit=1, payment=1)
        assert policy_count() == before + 2

    def test_each_denial_is_audited_once(self):
        purchase(600, limit=900, payment=90)
        client.post("/policies/600/grants/limit", json={"grantee": GRANTEE_B}, headers=caller(OWNER))

        client.get("/policies/600/premium", headers=caller(GRANTEE_B))
        client.get("/policies/600/limit", headers=caller(STRANGER_C))
        client.get("/policies/600/limit", headers=caller(GRANTEE_B))  # allowed, not audited

        denials = audit_events(600, "access_denied")
        assert len(denials) == 2
        assert [(e["caller"], e["field"]) for e in denials] == [
            (GRANTEE_B, "premium"),
            (STRANGER_C, "limit"),
        ]

        grants = audit_events(600, "granted")
        assert len(grants) == 1
        assert grants[0]["caller"] == OWNER
        assert grants[0]["grantee"] == GRANTEE_B
        assert grants[0]["field"] == "limit"
