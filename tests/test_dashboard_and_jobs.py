from __future__ import annotations


JOBS = [
    {"job_title": "Frontend Developer", "company": "Pixel", "location": "Dhaka", "job_type": "Full-time",
     "required_skills": "React,Node.js,SQL"},
    {"job_title": "Designer", "company": "Designory", "location": "Remote", "job_type": "Freelance",
     "required_skills": "Figma"},
    {"job_title": "Open Role", "company": "Mystery", "location": "Remote", "job_type": "Full-time",
     "required_skills": ""},
    {"job_title": "React Developer", "company": "Hooks Inc", "location": "Remote", "job_type": "Internship",
     "required_skills": "JavaScript, React"},
]

RESOURCES = [
    {"title": "Photoshop Basics", "url": "https://example.com/ps", "platform": "YouTube", "cost": "free",
     "related_skills": "photoshop"},
    {"title": "Node and Express", "url": "https://example.com/node", "platform": "YouTube", "cost": "free",
     "related_skills": "node.js, express"},
    {"title": "React Deep Dive", "url": "https://example.com/react", "platform": "Udemy", "cost": "paid",
     "related_skills": "React, JavaScript"},
]


def test_dashboard_recommends_best_matches(client, auth_headers, seed_catalog) -> None:
    seed_catalog(JOBS, RESOURCES)
    headers = auth_headers(skills="JavaScript, React", career_track="Web")

    r = client.get("/dashboard", headers=headers)
    assert r.status_code == 200
    body = r.json()

    assert body["user"]["skills"] == ["javascript", "react"]
    assert body["user"]["track"] == "Web"

    titles = [job["job_title"] for job in body["jobs"]]
    assert titles == ["React Developer", "Frontend Developer"]

    frontend = body["jobs"][1]
    assert frontend["match_percent"] == 33
    assert frontend["matched_skills"] == ["react"]
    assert frontend["missing_skills"] == ["node.js", "sql"]
    assert [res["title"] for res in frontend["recommended_resources"]] == ["Node and Express"]

    assert [res["title"] for res in body["resources"]] == ["React Deep Dive"]
    assert body["resources"][0]["match_count"] == 2


def test_dashboard_for_user_without_skills(client, auth_headers, seed_catalog) -> None:
    seed_catalog(JOBS, RESOURCES)
    r = client.get("/dashboard", headers=auth_headers())
    assert r.status_code == 200
    assert r.json()["jobs"] == []
    assert r.json()["resources"] == []


def test_dashboard_is_capped_at_five(client, auth_headers, seed_catalog) -> None:
    seed_catalog([{"job_title": f"Python Job {i}", "required_skills": "Python"} for i in range(8)])
    r = client.get("/dashboard", headers=auth_headers(skills="python"))
    assert r.status_code == 200
    jobs = r.json()["jobs"]
    assert [job["job_title"] for job in jobs] == [f"Python Job {i}" for i in range(5)]


def test_job_search_ranks_all_jobs_including_zero_matches(client, auth_headers, seed_catalog) -> None:
    seed_catalog(JOBS, RESOURCES)
    headers = auth_headers(skills="JavaScript, React")

    r = client.get("/jobs", headers=headers)
    assert r.status_code == 200
    body = r.json()
    assert len(body) == len(JOBS)
    assert [job["match_percent"] for job in body] == [100, 33, 0, 0]
    # Equal scores keep catalog order.
    assert [job["job_title"] for job in body[2:]] == ["Designer", "Open Role"]


def test_job_search_filters(client, auth_headers, seed_catalog) -> None:
    seed_catalog(JOBS, RESOURCES)
    headers = auth_headers(skills="react")

    by_title = client.get("/jobs", params={"title": "developer"}, headers=headers).json()
    assert {job["job_title"] for job in by_title} == {"Frontend Developer", "React Developer"}

    by_location = client.get("/jobs", params={"location": "Remote", "type": "Full-time"}, headers=headers).json()
    assert [job["job_title"] for job in by_location] == ["Open Role"]
    assert by_location[0]["match_percent"] == 0


def test_public_jobs_have_no_scores(client, seed_catalog) -> None:
    seed_catalog(JOBS, RESOURCES)
    r = client.get("/jobs/public", params={"type": "Freelance"})
    assert r.status_code == 200
    body = r.json()
    assert [job["job_title"] for job in body] == ["Designer"]
    assert "match_percent" not in body[0]


def test_single_job_match(client, auth_headers, seed_catalog) -> None:
    seed_catalog(JOBS, RESOURCES)
    headers = auth_headers(skills="react")
    jobs = client.get("/jobs/public").json()
    job_id = next(job["id"] for job in jobs if job["job_title"] == "Frontend Developer")

    r = client.get(f"/jobs/{job_id}/match", headers=headers)
    assert r.status_code == 200
    assert r.json()["match_percent"] == 33

    missing = client.get("/jobs/9999/match", headers=headers)
    assert missing.status_code == 404


def test_resources_listing_and_recommendations(client, auth_headers, seed_catalog) -> None:
    seed_catalog([], RESOURCES)
    public = client.get("/resources")
    assert public.status_code == 200
    assert len(public.json()) == len(RESOURCES)

    r = client.get("/resources/recommended", headers=auth_headers(skills="react, node.js"))
    assert r.status_code == 200
    titles = [item["title"] for item in r.json()]
    assert titles == ["Node and Express", "React Deep Dive"]
