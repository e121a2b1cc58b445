from dataclasses import dataclass

from liveassigns import (
    assign,
    assign_new,
    assigns_to_attributes,
    changed_keys,
    checkpoint,
    new_component,
    update,
)


@dataclass(frozen=True)
class User:
    name: str
    role: str


def load_user() -> User:
    """Stand-in for an expensive lookup. Only runs when nothing provides a user."""
    print("Loading user...")
    return User(name="Ada", role="admin")


def render(container, template_keys: list[str]) -> None:
    """Pretend renderer: recompute only the template parts whose assigns changed."""
    marked = changed_keys(container.tracker)
    dirty = template_keys if marked is None else [k for k in template_keys if k in marked]
    print(f"Re-rendering {dirty or 'nothing'}")


if __name__ == "__main__":
    template = ["user", "count", "title"]

    # Parent component mounts and loads the user once
    parent = new_component({"live_action": None, "flash": {}})
    parent = assign_new(parent, "user", load_user)
    parent = assign(parent, count=0, title="Dashboard")
    render(parent, template)
    parent = checkpoint(parent)

    # Child inherits the user from its parent instead of loading it again
    child = new_component({"class": "card", "title": "Profile"}, parent=parent.assigns)
    child = assign_new(child, "user", load_user)
    child = assign_new(child, "greeting", lambda a: f"Hello {a['user'].name}")
    print(f"Child greeting: {child['greeting']}")
    print(f"Forwarded attributes: {assigns_to_attributes(child, ['user', 'greeting'])}")

    # An event bumps the counter; only that part re-renders
    parent = update(parent, "count", lambda n: n + 1)
    parent = assign(parent, "title", "Dashboard")
    render(parent, template)
    parent = checkpoint(parent)

    # Nothing changed
    parent = update(parent, "count", lambda n: n)
    render(parent, template)
