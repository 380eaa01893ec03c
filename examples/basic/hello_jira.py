"""Render a small document to Jira markup — zero config, zero deps."""

from jiramark import BulletList, Header, Para, Strong, render, render_document

intro = f"Hello {render(Strong('World'))}"
doc = render_document([Header(1, "Greeting"), Para(intro), BulletList(("one", "two"))])
print(doc.text)
