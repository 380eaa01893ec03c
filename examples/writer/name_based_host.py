"""Drive jiramark the way a custom-writer host does: by node-type name.

The host walks its tree post-order, so every call receives strings that are
already rendered. Unknown names print a warning on stderr and render empty.
"""

from jiramark import JiraWriter, RenderConfig

writer = JiraWriter(RenderConfig.original())

title = writer.Header(2, writer.Str("Release") + writer.Space() + writer.Str("notes"), {})
code = writer.CodeBlock("pip install jiramark", {"class": "bash"})
table = writer.Table("", [], [], ["Version", "Date"], [["0.1.0", "2026-10-19"]])
figure = writer["Figure"]("ignored")  # WARNING: Undefined function 'Figure'

body = writer.Blocksep().join([title, code, table, figure])
print(writer.Doc(body, {"title": "Release notes"}, {}))
