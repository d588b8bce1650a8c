"""
Member subscription endpoints and the gender eligibility rule.
"""

from conftest import create_member, create_sport

MEMBERS = "/api/v1/members"


async def subscribe(client, member_id, sport_id, subscription_type="group"):
    return await client.post(
        f"{MEMBERS}/{member_id}/subscribe",
        json={"sportId": sport_id, "subscriptionType": subscription_type},
    )


class TestSubscribe:

    async def test_subscribe_to_mixed_sport(self, async_client):
        member = await create_member(async_client, gender="male")
        sport = await create_sport(async_client, allowedGender="mix")

        response = await subscribe(async_client, member["id"], sport["id"], "private")

        assert response.status_code == 201
        body = response.json()
        assert body["memberId"] == member["id"]
        assert body["sportId"] == sport["id"]
        assert body["subscriptionType"] == "private"
        assert body["sport"]["name"] == sport["name"]

    async def test_gender_restricted_sport(self, async_client):
        member = await create_member(async_client, gender="female")
        sport = await create_sport(async_client, name="Boxing", allowedGender="male")

        response = await subscribe(async_client, member["id"], sport["id"])

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "BUSINESS_RULE_VIOLATION"
        assert error["message"] == "Sport Boxing is only available for male members"

    async def test_matching_gender(self, async_client):
        member = await create_member(async_client, gender="female")
        sport = await create_sport(async_client, name="Netball", allowedGender="female")

        assert (await subscribe(async_client, member["id"], sport["id"])).status_code == 201

    async def test_duplicate_subscription(self, async_client):
        member = await create_member(async_client)
        sport = await create_sport(async_client)
        await subscribe(async_client, member["id"], sport["id"])

        response = await subscribe(async_client, member["id"], sport["id"], "private")

        assert response.status_code == 409
        assert response.json()["error"]["message"] == "Member is already subscribed to this sport"

    async def test_missing_member_or_sport(self, async_client):
        member = await create_member(async_client)
        sport = await create_sport(async_client)

        assert (await subscribe(async_client, 999, sport["id"])).status_code == 404
        assert (await subscribe(async_client, member["id"], 999)).status_code == 404

    async def test_invalid_subscription_type(self, async_client):
        member = await create_member(async_client)
        sport = await create_sport(async_client)

        assert (await subscribe(async_client, member["id"], sport["id"], "vip")).status_code == 422


class TestUnsubscribeAndList:

    async def test_list_and_unsubscribe(self, async_client):
        member = await create_member(async_client)
        tennis = await create_sport(async_client, name="Tennis")
        golf = await create_sport(async_client, name="Golf")
        await subscribe(async_client, member["id"], tennis["id"])
        await subscribe(async_client, member["id"], golf["id"], "private")

        listed = (await async_client.get(f"{MEMBERS}/{member['id']}/subscriptions")).json()
        assert {s["sport"]["name"] for s in listed} == {"Tennis", "Golf"}

        response = await async_client.delete(f"{MEMBERS}/{member['id']}/unsubscribe/{tennis['id']}")
        assert response.status_code == 204

        listed = (await async_client.get(f"{MEMBERS}/{member['id']}/subscriptions")).json()
        assert [s["sportId"] for s in listed] == [golf["id"]]

    async def test_created_at_reads_back_as_created(self, async_client):
        member = await create_member(async_client)
        sport = await create_sport(async_client)
        created = (await subscribe(async_client, member["id"], sport["id"])).json()

        listed = (await async_client.get(f"{MEMBERS}/{member['id']}/subscriptions")).json()

        assert listed[0]["createdAt"] == created["createdAt"]

    async def test_unsubscribe_without_subscription(self, async_client):
        member = await create_member(async_client)
        sport = await create_sport(async_client)

        response = await async_client.delete(f"{MEMBERS}/{member['id']}/unsubscribe/{sport['id']}")

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Subscription not found"

    async def test_member_without_subscriptions(self, async_client):
        member = await create_member(async_client)

        response = await async_client.get(f"{MEMBERS}/{member['id']}/subscriptions")

        assert response.status_code == 200
        assert response.json() == []


class TestCascades:

    async def test_removing_member_drops_its_subscriptions(self, async_client):
        member = await create_member(async_client)
        sport = await create_sport(async_client)
        await subscribe(async_client, member["id"], sport["id"])

        await async_client.delete(f"{MEMBERS}/{member['id']}")

        assert (await async_client.get(f"{MEMBERS}/{member['id']}/subscriptions")).json() == []

    async def test_removing_sport_drops_its_subscriptions(self, async_client):
        member = await create_member(async_client)
        sport = await create_sport(async_client)
        await subscribe(async_client, member["id"], sport["id"])

        await async_client.delete(f"/api/v1/sports/{sport['id']}")

        assert (await async_client.get(f"{MEMBERS}/{member['id']}/subscriptions")).json() == []
        # Same pair can be used again once the sport is recreated
        again = await create_sport(async_client)
        assert (await subscribe(async_client, member["id"], again["id"])).status_code == 201
