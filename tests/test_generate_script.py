from adstudio.services.script_templates import fallback_script

PAYLOAD = {
    "businessName": "Karol Posts",
    "service": "social media posts",
    "targetAudience": "small business owners",
}


def test_returns_generated_script(client, use_openai):
    fake = use_openai(content="\n[soft, emotional]\nGenerated ad\n")

    response = client.post("/generate-script", json=PAYLOAD)

    assert response.status_code == 200
    assert response.json() == {"script": "[soft, emotional]\nGenerated ad"}
    prompt = fake.calls[0]["messages"][-1]["content"]
    assert "Business Name: Karol Posts" in prompt
    assert "Target Audience: small business owners" in prompt


def test_upstream_error_returns_fallback(client, use_openai):
    use_openai(error=RuntimeError("boom"))

    response = client.post("/generate-script", json=PAYLOAD)

    assert response.status_code == 200
    assert response.json()["script"] == fallback_script(
        "Karol Posts", "social media posts", "small business owners"
    )


def test_blank_result_returns_fallback(client, use_openai):
    use_openai(content="   ")

    response = client.post("/generate-script", json=PAYLOAD)

    assert response.status_code == 200
    assert response.json()["script"] == fallback_script(
        "Karol Posts", "social media posts", "small business owners"
    )


def test_missing_fields_are_interpolated_empty(client, use_openai):
    fake = use_openai(content="ok")

    response = client.post("/generate-script", json={})

    assert response.status_code == 200
    assert response.json() == {"script": "ok"}
    assert "Business Name: \n" in fake.calls[0]["messages"][-1]["content"]


def test_no_body_still_returns_script(client, use_openai):
    use_openai(error=TimeoutError())

    response = client.post("/generate-script")

    assert response.status_code == 200
    assert response.json()["script"] == fallback_script("", "", "")
