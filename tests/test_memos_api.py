"""Tests for the /memos HTTP endpoints."""

import pytest


class TestListMemos:
    """GET /memos"""

    def test_returns_all_memos_newest_first(self, client, memo_repo):
        memos = [memo_repo.create_memo(f"タイトル{i}", f"本文{i}") for i in range(3)]

        response = client.get("/memos")

        assert response.status_code == 200
        body = response.json()
        assert len(body["memos"]) == 3
        assert [m["id"] for m in body["memos"]] == [m.id for m in reversed(memos)]

    def test_empty_list(self, client):
        response = client.get("/memos")

        assert response.status_code == 200
        assert response.json() == {"memos": []}

    def test_memo_fields(self, client, memo_repo):
        memo = memo_repo.create_memo("会議", "議事録")

        entry = client.get("/memos").json()["memos"][0]

        assert entry["id"] == memo.id
        assert entry["title"] == "会議"
        assert entry["content"] == "議事録"
        assert "created_at" in entry
        assert "updated_at" in entry

    def test_title_partial_match(self, client, memo_repo):
        first = memo_repo.create_memo("買い物リスト", "牛乳")
        memo_repo.create_memo("会議メモ", "議題")
        third = memo_repo.create_memo("週末の買い物", "パン")

        response = client.get("/memos", params={"title": "買い物"})

        assert response.status_code == 200
        assert [m["id"] for m in response.json()["memos"]] == [third.id, first.id]

    def test_title_exact_match(self, client, memo_repo):
        memo = memo_repo.create_memo("会議メモ", "議題")
        memo_repo.create_memo("買い物リスト", "牛乳")

        response = client.get("/memos", params={"title": "会議メモ"})

        assert [m["id"] for m in response.json()["memos"]] == [memo.id]

    def test_empty_title_returns_all(self, client, memo_repo):
        for i in range(2):
            memo_repo.create_memo(f"タイトル{i}", "本文")

        response = client.get("/memos", params={"title": ""})

        assert len(response.json()["memos"]) == 2

    def test_title_wildcards_are_literal(self, client, memo_repo):
        memo = memo_repo.create_memo("100%達成", "本文")
        memo_repo.create_memo("100点", "本文")

        response = client.get("/memos", params={"title": "%"})

        assert [m["id"] for m in response.json()["memos"]] == [memo.id]


class TestGetMemo:
    """GET /memos/{id}"""

    def test_returns_memo_with_comments_newest_first(self, client, memo_repo, comment_repo):
        memo = memo_repo.create_memo("タイトル", "本文")
        comments = [comment_repo.create_comment(memo.id, f"コメント{i}") for i in range(3)]

        response = client.get(f"/memos/{memo.id}", headers={"Accept": "application/json"})

        assert response.status_code == 200
        body = response.json()
        assert body["memo"]["id"] == memo.id
        assert len(body["memo"]["comments"]) == 3
        assert [c["id"] for c in body["memo"]["comments"]] == [c.id for c in reversed(comments)]

    def test_only_own_comments(self, client, memo_repo, comment_repo):
        memo = memo_repo.create_memo("タイトル", "本文")
        other = memo_repo.create_memo("別のメモ", "本文")
        comment = comment_repo.create_comment(memo.id, "こちら")
        comment_repo.create_comment(other.id, "あちら")

        comments = client.get(f"/memos/{memo.id}").json()["memo"]["comments"]

        assert [c["id"] for c in comments] == [comment.id]
        assert comments[0]["memo_id"] == memo.id

    def test_memo_without_comments(self, client, memo_repo):
        memo = memo_repo.create_memo("タイトル", "本文")

        response = client.get(f"/memos/{memo.id}")

        assert response.status_code == 200
        assert response.json()["memo"]["comments"] == []

    def test_not_found(self, client):
        response = client.get("/memos/0")

        assert response.status_code == 404
        assert response.json() == {"message": "メモが見つかりません"}

    @pytest.mark.parametrize("memo_id", ["-1", "9223372036854775807", "99999999999999999999", "-99999999999999999999"])
    def test_unknown_ids_return_not_found(self, client, memo_repo, memo_id):
        memo_repo.create_memo("タイトル", "本文")

        response = client.get(f"/memos/{memo_id}")

        assert response.status_code == 404
        assert response.json() == {"message": "メモが見つかりません"}

    def test_non_integer_id_is_rejected(self, client):
        response = client.get("/memos/abc")

        assert response.status_code == 422


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
