"""
Tests for the server-rendered compose page.
"""


class TestComposePage:
    def test_form_lists_templates(self, client):
        resp = client.get("/compose")

        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/html")
        for name in ("Formal", "Creative", "Direct", "Standard"):
            assert name in resp.text
        assert 'value="default" checked' in resp.text

    def test_submit_renders_email(self, client, fake_llm):
        resp = client.post(
            "/compose",
            data={"text": "Mobile developer, Kotlin", "template": "creative", "userDetails": "Sam"},
        )

        assert resp.status_code == 200
        assert "Application for Senior Python Developer" in resp.text
        assert "mailto:?subject=Application%20for%20Senior%20Python%20Developer" in resp.text
        assert 'value="creative" checked' in resp.text
        assert "Mobile developer, Kotlin" in resp.text

    def test_submit_without_input_shows_error(self, client, fake_llm):
        resp = client.post("/compose", data={"template": "formal"})

        assert resp.status_code == 400
        assert "Either text description or file upload is required" in resp.text
        assert fake_llm.calls == []

    def test_output_is_escaped(self, client, fake_llm):
        fake_llm.reply = "Subject: Hi\n<script>alert(1)</script>"

        resp = client.post("/compose", data={"text": "JD"})

        assert "<script>alert(1)</script>" not in resp.text
        assert "&lt;script&gt;" in resp.text
