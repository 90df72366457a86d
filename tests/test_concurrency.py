import threading


def test_concurrent_votes_from_one_email_admit_one(app):
    barrier = threading.Barrier(2)
    statuses = []
    lock = threading.Lock()

    def vote(choice_id):
        client = app.test_client()
        barrier.wait()
        resp = client.post("/api/vote", json={"email": "Race@Example.com", "choiceId": choice_id})
        with lock:
            statuses.append(resp.status_code)

    threads = [threading.Thread(target=vote, args=(c,)) for c in ("memeA", "memeB")]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=30)

    assert sorted(statuses) == [201, 409]

    body = app.test_client().get("/api/results").get_json()
    assert body["totalVotes"] == 1
    assert body["allVotes"][0]["email"] == "race@example.com"


def test_concurrent_votes_from_different_emails_all_count(app):
    emails = [f"voter{i}@example.com" for i in range(8)]
    barrier = threading.Barrier(len(emails))
    statuses = []
    lock = threading.Lock()

    def vote(email):
        client = app.test_client()
        barrier.wait()
        resp = client.post("/api/vote", json={"email": email, "choiceId": "memeA"})
        with lock:
            statuses.append(resp.status_code)

    threads = [threading.Thread(target=vote, args=(e,)) for e in emails]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=30)

    assert statuses == [201] * len(emails)
    body = app.test_client().get("/api/results").get_json()
    assert body["voteCounts"] == [{"_id": "memeA", "count": len(emails)}]
