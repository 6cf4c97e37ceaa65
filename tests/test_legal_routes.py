from urllib.parse import unquote

import pytest
from markupsafe import escape

from allwayscalc.blueprints.legal.content import FAQ_SECTIONS


@pytest.mark.parametrize(
    "path,heading",
    [
        ("/about-us", "Our Mission"),
        ("/contact-us", "Contact Us"),
        ("/faq", "Frequently Asked Questions"),
        ("/privacy-policy", "Privacy Policy for AllWaysCalc"),
        ("/terms-and-conditions", "Terms and Conditions"),
        ("/disclaimer", "Professional Disclaimer"),
    ],
)
def test_info_pages_render(client, path, heading):
    response = client.get(path)

    assert response.status_code == 200
    assert heading in response.get_data(as_text=True)


def test_faq_renders_every_question(client):
    body = client.get("/faq").get_data(as_text=True)

    assert "Math &amp; Science" in body
    for section, entries in FAQ_SECTIONS:
        assert str(escape(section)) in body
        for entry in entries:
            assert str(escape(entry.question)) in body


def test_faq_content_is_immutable():
    with pytest.raises(AttributeError):
        FAQ_SECTIONS[0][1][0].question = "changed"


def test_contact_form_builds_mailto_link(client):
    response = client.post(
        "/contact-us",
        data={
            "name": "Priya",
            "email": "priya@example.com",
            "subject": "Feature request",
            "message": "Please add a GST calculator.",
        },
    )

    assert response.status_code == 200
    body = response.get_data(as_text=True)
    assert "Email Client Opening" in body
    assert "mailto:allwayscalc@gmail.com?subject=Feature%20request" in body
    start = body.index("mailto:allwayscalc@gmail.com")
    link = unquote(body[start:body.index('"', start)].replace("&amp;", "&"))
    assert "Name: Priya\nEmail: priya@example.com\n\nMessage:\nPlease add a GST calculator." in link


def test_contact_form_validation(client):
    response = client.post(
        "/contact-us",
        data={"name": "P", "email": "not-an-email", "subject": "Hi", "message": "short"},
    )

    body = response.get_data(as_text=True)
    assert "Email Client Opening" not in body
    assert "Name must be at least 2 characters." in body
    assert "Please enter a valid email address." in body
    assert "Subject must be at least 5 characters." in body
    assert "Message must be at least 10 characters." in body
