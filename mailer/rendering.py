from django.template.loader import render_to_string

CERTIFICATE_ISSUED = {
    "key": "certificate_issued",
    "subject_template": "{institute}: your {certificate_type} certificate {certificate_number}",
    "html_template_path": "emails/certificate_issued.html",
    "text_template_path": "emails/certificate_issued.txt",
}


def render_email(template, context):
    subject = template["subject_template"].format(**context.get("subject_vars", {}))
    html_body = render_to_string(template["html_template_path"], context)
    text_path = template.get("text_template_path")
    text_body = render_to_string(text_path, context) if text_path else None
    return subject, text_body, html_body
