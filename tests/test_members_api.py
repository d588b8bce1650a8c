"""
/api/v1/members endpoints.
"""

from conftest import create_member

MEMBERS = "/api/v1/members"


class TestCreateMember:

    async def test_create_root_member(self, async_client):
        response = await async_client.post(MEMBERS, json={
            "firstName": "John",
            "lastName": "Doe",
            "gender": "male",
            "birthdate": "1990-01-01",
        })

        assert response.status_code == 201
        body = response.json()
        assert isinstance(body["id"], int)
        assert body["firstName"] == "John"
        assert body["familyHeadId"] is None
        assert body["subscriptionDate"]

    async def test_create_under_family_head(self, async_client):
        head = await create_member(async_client)

        child = await create_member(async_client, firstName="Byron", familyHeadId=head["id"])

        assert child["familyHeadId"] == head["id"]

    async def test_missing_family_head(self, async_client):
        response = await async_client.post(MEMBERS, json={
            "firstName": "Orphan",
            "lastName": "Doe",
            "gender": "male",
            "birthdate": "1990-01-01",
            "familyHeadId": 42,
        })

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "REFERENCE_NOT_FOUND"
        assert error["details"]["reference_id"] == 42

        # Nothing was inserted
        assert (await async_client.get(f"{MEMBERS}/1")).status_code == 404

    async def test_future_birthdate_is_rejected(self, async_client):
        response = await async_client.post(MEMBERS, json={
            "firstName": "Future",
            "lastName": "Kid",
            "gender": "female",
            "birthdate": "2999-01-01",
        })

        assert response.status_code == 422

    async def test_invalid_gender_and_unknown_fields(self, async_client):
        base = {"firstName": "A", "lastName": "B", "birthdate": "1990-01-01"}

        assert (await async_client.post(MEMBERS, json={**base, "gender": "other"})).status_code == 422
        assert (await async_client.post(MEMBERS, json={**base, "gender": "male", "id": 5})).status_code == 422

    async def test_blank_name_is_rejected(self, async_client):
        response = await async_client.post(MEMBERS, json={
            "firstName": "   ",
            "lastName": "Doe",
            "gender": "male",
            "birthdate": "1990-01-01",
        })

        assert response.status_code == 422


class TestGetMember:

    async def test_subscription_date_reads_back_as_created(self, async_client):
        created = await create_member(async_client)

        fetched = (await async_client.get(f"{MEMBERS}/{created['id']}")).json()

        assert fetched["subscriptionDate"] == created["subscriptionDate"]

    async def test_member_with_family(self, async_client):
        head = await create_member(async_client, firstName="Head")
        child = await create_member(async_client, firstName="Child", familyHeadId=head["id"])

        head_body = (await async_client.get(f"{MEMBERS}/{head['id']}")).json()
        child_body = (await async_client.get(f"{MEMBERS}/{child['id']}")).json()

        assert head_body["familyHead"] is None
        assert [m["id"] for m in head_body["familyMembers"]] == [child["id"]]
        assert child_body["familyHead"]["id"] == head["id"]
        assert child_body["familyMembers"] == []

    async def test_not_found_envelope(self, async_client):
        response = await async_client.get(f"{MEMBERS}/999")

        assert response.status_code == 404
        error = response.json()["error"]
        assert error["code"] == "NOT_FOUND"
        assert error["message"] == "Member with ID 999 not found"
        assert error["timestamp"]
        assert error["request_id"] == response.headers["X-Request-ID"]

    async def test_non_positive_id(self, async_client):
        assert (await async_client.get(f"{MEMBERS}/0")).status_code == 422


class TestUpdateMember:

    async def test_partial_update(self, async_client):
        member = await create_member(async_client)

        response = await async_client.patch(f"{MEMBERS}/{member['id']}", json={"lastName": "King"})

        assert response.status_code == 200
        assert response.json()["lastName"] == "King"
        assert response.json()["firstName"] == member["firstName"]

    async def test_change_and_detach_family_head(self, async_client):
        head = await create_member(async_client, firstName="Head")
        member = await create_member(async_client)

        moved = await async_client.patch(f"{MEMBERS}/{member['id']}", json={"familyHeadId": head["id"]})
        assert moved.json()["familyHeadId"] == head["id"]

        detached = await async_client.patch(f"{MEMBERS}/{member['id']}", json={"familyHeadId": None})
        assert detached.status_code == 200
        assert detached.json()["familyHeadId"] is None
        assert detached.json()["familyHead"] is None

    async def test_cycle_is_rejected_and_nothing_changes(self, async_client):
        m1 = await create_member(async_client, firstName="One")
        m2 = await create_member(async_client, firstName="Two", familyHeadId=m1["id"])
        m3 = await create_member(async_client, firstName="Three", familyHeadId=m2["id"])

        response = await async_client.patch(
            f"{MEMBERS}/{m1['id']}",
            json={"familyHeadId": m3["id"], "firstName": "Changed"},
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "CYCLIC_HIERARCHY"

        unchanged = (await async_client.get(f"{MEMBERS}/{m1['id']}")).json()
        assert unchanged["firstName"] == "One"
        assert unchanged["familyHeadId"] is None

    async def test_self_as_family_head(self, async_client):
        member = await create_member(async_client)

        response = await async_client.patch(f"{MEMBERS}/{member['id']}", json={"familyHeadId": member["id"]})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "CYCLIC_HIERARCHY"

    async def test_null_required_field(self, async_client):
        member = await create_member(async_client)

        response = await async_client.patch(f"{MEMBERS}/{member['id']}", json={"firstName": None})

        assert response.status_code == 422

    async def test_subscription_date_is_not_writable(self, async_client):
        member = await create_member(async_client)

        response = await async_client.patch(
            f"{MEMBERS}/{member['id']}", json={"subscriptionDate": "2020-01-01T00:00:00Z"}
        )

        assert response.status_code == 422

    async def test_update_missing_member(self, async_client):
        response = await async_client.patch(f"{MEMBERS}/77", json={"lastName": "Nobody"})

        assert response.status_code == 404


class TestRemoveMember:

    async def test_remove_reassigns_dependents(self, async_client):
        m1 = await create_member(async_client, firstName="M1")
        m2 = await create_member(async_client, firstName="M2", familyHeadId=m1["id"])
        m3 = await create_member(async_client, firstName="M3", familyHeadId=m2["id"])

        preview = await async_client.get(f"{MEMBERS}/{m2['id']}/removal-preview")
        assert preview.status_code == 200
        assert preview.json()["reassignedCount"] == 1
        assert preview.json()["newFamilyHeadId"] == m1["id"]
        assert [d["id"] for d in preview.json()["dependents"]] == [m3["id"]]

        response = await async_client.delete(f"{MEMBERS}/{m2['id']}")

        assert response.status_code == 200
        assert response.json()["member"]["id"] == m2["id"]
        assert response.json()["reassignedCount"] == 1

        m3_after = (await async_client.get(f"{MEMBERS}/{m3['id']}")).json()
        assert m3_after["familyHeadId"] == m1["id"]
        m1_after = (await async_client.get(f"{MEMBERS}/{m1['id']}")).json()
        assert [m["id"] for m in m1_after["familyMembers"]] == [m3["id"]]

    async def test_remove_root_makes_new_roots(self, async_client):
        root = await create_member(async_client)
        child = await create_member(async_client, familyHeadId=root["id"])

        await async_client.delete(f"{MEMBERS}/{root['id']}")

        assert (await async_client.get(f"{MEMBERS}/{child['id']}")).json()["familyHeadId"] is None

    async def test_remove_twice(self, async_client):
        member = await create_member(async_client)

        assert (await async_client.delete(f"{MEMBERS}/{member['id']}")).status_code == 200
        second = await async_client.delete(f"{MEMBERS}/{member['id']}")

        assert second.status_code == 404
        assert second.json()["error"]["code"] == "NOT_FOUND"


class TestHierarchy:

    async def test_ancestor_chain(self, async_client):
        m1 = await create_member(async_client)
        m2 = await create_member(async_client, familyHeadId=m1["id"])
        m3 = await create_member(async_client, familyHeadId=m2["id"])

        response = await async_client.get(f"{MEMBERS}/{m3['id']}/hierarchy")

        assert response.status_code == 200
        assert response.json() == {
            "memberId": m3["id"],
            "chain": [m3["id"], m2["id"], m1["id"]],
            "rootId": m1["id"],
            "depth": 2,
        }

    async def test_missing_member(self, async_client):
        assert (await async_client.get(f"{MEMBERS}/5/hierarchy")).status_code == 404
