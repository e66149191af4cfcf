"""Integration tests for the messaging endpoints via TestClient."""


class TestMessagesAPI:
    def test_send_read_reply(self, client, signup):
        buyer_id, buyer_headers = signup(role="user")
        caterer_id, caterer_headers = signup(role="caterer")

        response = client.post("/messages", json={"recipient_id": caterer_id, "content": "Hello"}, headers=buyer_headers)
        assert response.status_code == 201
        message_id = response.json()["message_id"]

        [received] = client.get("/messages/received", headers=caterer_headers).json()
        assert received["message_id"] == message_id
        assert received["read"] is False

        assert client.put(f"/messages/{message_id}/read", headers=caterer_headers).status_code == 200
        assert client.get("/messages/received", headers=caterer_headers).json()[0]["read"] is True

        response = client.post(f"/messages/{message_id}/reply", json={"content": "Hi back"}, headers=caterer_headers)
        assert response.status_code == 201
        [reply] = client.get("/messages/received", headers=buyer_headers).json()
        assert reply["original_message_id"] == message_id
        assert reply["recipient_id"] == buyer_id

    def test_visitor_message(self, client, signup):
        caterer_id, caterer_headers = signup(role="caterer")
        body = {
            "sender_name": "Tobi",
            "sender_email": "tobi@example.com",
            "recipient_id": caterer_id,
            "content": "Weddings?",
        }
        assert client.post("/messages/visitor", json=body).status_code == 201

        [received] = client.get("/messages/received", headers=caterer_headers).json()
        assert received["sender_type"] == "visitor"

        response = client.post(f"/messages/{received['message_id']}/reply", json={"content": "x"}, headers=caterer_headers)
        assert response.status_code == 403

    def test_visitor_to_user_is_403(self, client, signup):
        user_id, _ = signup(role="user")
        body = {"sender_name": "Tobi", "sender_email": "tobi@example.com", "recipient_id": user_id, "content": "Hi"}
        assert client.post("/messages/visitor", json=body).status_code == 403

    def test_mark_read_by_stranger_is_403(self, client, signup):
        _, buyer_headers = signup(role="user")
        caterer_id, _ = signup(role="caterer")
        message_id = client.post(
            "/messages", json={"recipient_id": caterer_id, "content": "Hello"}, headers=buyer_headers
        ).json()["message_id"]
        assert client.put(f"/messages/{message_id}/read", headers=buyer_headers).status_code == 403

    def test_inbox_requires_login(self, client):
        assert client.get("/messages/received").status_code == 401
