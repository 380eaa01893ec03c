"""NodeRenderer protocol — stable interface for node renderers.

Anything implementing ``render(node) -> str`` conforms. The built-in
``JiraRenderer`` is the reference implementation; ``render_document`` accepts
any conforming renderer, which lets hosts wrap or decorate it.

Example:
    from jiramark.protocol import NodeRenderer

    def render_heading(renderer: NodeRenderer, text: str) -> str:
        return renderer.render(Header(1, text))

"""

from typing import Protocol

from jiramark.nodes import Node


class NodeRenderer(Protocol):
    """Protocol for node renderers."""

    def render(self, node: Node) -> str:
        """Render one node whose children are already rendered.

        Args:
            node: The node to render.

        Returns:
            Rendered Jira text.

        """
        ...
