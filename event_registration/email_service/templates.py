from dataclasses import dataclass
from html import escape

from event_registration.registrations.dtos import Language


@dataclass
class EmailTemplates:
    # Croatian templates
    EDIT_LINK_SUBJECT_HR = "Potvrda registracije — {event_name}"
    EDIT_LINK_HTML_HR = """
    <!DOCTYPE html>
    <html>
    <head>
        <meta charset="utf-8">
        <meta name="viewport" content="width=device-width, initial-scale=1.0">
    </head>
    <body style="font-family: ui-sans-serif, system-ui, -apple-system, Segoe UI, Roboto, Helvetica, Arial; line-height: 1.45; color: #111;">
        <div style="max-width: 560px; margin: 0 auto; padding: 24px;">
            <h2 style="margin: 0 0 12px;">{event_name}</h2>
            <p style="margin: 0 0 14px;">Pozdrav {full_name},<br/><br/>Hvala na registraciji za {event_name}.</p>

            <p style="margin: 0 0 10px;">Ako trebate izmijeniti podatke, koristite ovaj link:</p>

            <p style="margin: 16px 0;">
                <a href="{edit_url}" style="display: inline-block; background: #111; color: #fff; text-decoration: none; padding: 12px 16px; border-radius: 12px;">
                    Uredi podatke
                </a>
            </p>

            <p style="margin: 12px 0 0; font-size: 12px; color: #555; word-break: break-all;">
                Direktan link:<br/>
                <a href="{edit_url}" style="color: #111;">{edit_url}</a>
            </p>

            <hr style="margin: 24px 0; border: none; border-top: 1px solid #e5e5e5;" />
            <p style="margin: 0; font-size: 12px; color: #666;">Ako niste Vi napravili ovu registraciju, možete ignorirati ovu poruku.</p>
        </div>
    </body>
    </html>
    """

    EDIT_LINK_TEXT_HR = """
    Pozdrav {full_name},

    Hvala na registraciji za {event_name}.

    Ako trebate izmijeniti podatke, koristite ovaj link:
    {edit_url}

    Ako niste Vi napravili ovu registraciju, možete ignorirati ovu poruku.
    """

    # English templates
    EDIT_LINK_SUBJECT_EN = "Registration confirmation — {event_name}"
    EDIT_LINK_HTML_EN = """
    <!DOCTYPE html>
    <html>
    <head>
        <meta charset="utf-8">
        <meta name="viewport" content="width=device-width, initial-scale=1.0">
    </head>
    <body style="font-family: ui-sans-serif, system-ui, -apple-system, Segoe UI, Roboto, Helvetica, Arial; line-height: 1.45; color: #111;">
        <div style="max-width: 560px; margin: 0 auto; padding: 24px;">
            <h2 style="margin: 0 0 12px;">{event_name}</h2>
            <p style="margin: 0 0 14px;">Hi {full_name},<br/><br/>Thanks for registering for {event_name}.</p>

            <p style="margin: 0 0 10px;">If you need to edit your details, use this link:</p>

            <p style="margin: 16px 0;">
                <a href="{edit_url}" style="display: inline-block; background: #111; color: #fff; text-decoration: none; padding: 12px 16px; border-radius: 12px;">
                    Edit details
                </a>
            </p>

            <p style="margin: 12px 0 0; font-size: 12px; color: #555; word-break: break-all;">
                Direct link:<br/>
                <a href="{edit_url}" style="color: #111;">{edit_url}</a>
            </p>

            <hr style="margin: 24px 0; border: none; border-top: 1px solid #e5e5e5;" />
            <p style="margin: 0; font-size: 12px; color: #666;">If you didn't make this registration, you can ignore this email.</p>
        </div>
    </body>
    </html>
    """

    EDIT_LINK_TEXT_EN = """
    Hi {full_name},

    Thanks for registering for {event_name}.

    If you need to edit your details, use this link:
    {edit_url}

    If you didn't make this registration, you can ignore this email.
    """

    @classmethod
    def get_edit_link_templates(cls, language: Language) -> tuple[str, str, str]:
        """Get edit link templates for a specific language.

        Returns: (subject, html_body, text_body)
        """
        lang_suffix = language.value.upper()
        subject = getattr(cls, f"EDIT_LINK_SUBJECT_{lang_suffix}", cls.EDIT_LINK_SUBJECT_HR)
        html = getattr(cls, f"EDIT_LINK_HTML_{lang_suffix}", cls.EDIT_LINK_HTML_HR)
        text = getattr(cls, f"EDIT_LINK_TEXT_{lang_suffix}", cls.EDIT_LINK_TEXT_HR)
        return subject, html, text

    @classmethod
    def render_edit_link(
        cls,
        language: Language,
        full_name: str,
        edit_url: str,
        event_name: str,
    ) -> tuple[str, str, str]:
        """Render the edit link email. Values in the HTML body are escaped.

        Returns: (subject, html_body, text_body)
        """
        subject, html_template, text_template = cls.get_edit_link_templates(language)
        html_body = html_template.format(
            full_name=escape(full_name),
            edit_url=escape(edit_url),
            event_name=escape(event_name),
        )
        text_body = text_template.format(
            full_name=full_name,
            edit_url=edit_url,
            event_name=event_name,
        )
        return subject.format(event_name=event_name), html_body, text_body
