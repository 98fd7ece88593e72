"""
authorizable — Hello World

Rules pair an action with a resource. A strategy combines the relevant
rules into one decision. No relevant rules means no.
"""

from dataclasses import dataclass

from authorizable import AccessDeniedError, AuthorizableUser, Manager

# ─── Your models (anything — the engine never inspects them) ───


@dataclass(eq=False)
class User(AuthorizableUser):
    id: int
    name: str


@dataclass
class Post:
    id: int
    author_id: int
    published: bool = False


def initialize(auth: Manager) -> None:
    # Anyone can read published posts.
    auth.allow("read", Post, lambda post: post.published)

    # Only guests can sign up.
    if auth.get_user() is None:
        auth.allow("create", "User")

    # Authors can edit and delete their own posts.
    auth.allow(["update", "delete"], Post, lambda post, user: post.author_id == user.id)

    # Nobody deletes a published post.
    auth.deny("delete", Post, lambda post: post.published)


def main():
    alice = User(id=1, name="alice")
    bob = User(id=2, name="bob")

    # ──────────────────────────────────────
    #  1. One manager per request
    # ──────────────────────────────────────
    auth = Manager.from_config({"strategy": "subtractive"}, initialize, user=alice)
    for u in (alice, bob):
        u.set_authorizable_manager(auth)

    draft = Post(id=10, author_id=alice.id)
    live = Post(id=11, author_id=alice.id, published=True)

    # ──────────────────────────────────────
    #  2. Ask questions
    # ──────────────────────────────────────
    print("alice update draft:", auth.can("update", draft))
    print("alice delete live: ", auth.can("delete", live))
    print("bob update draft:  ", bob.can("update", draft))
    print("bob read live:     ", bob.can("read", live))
    print("alice create user: ", auth.can("create", "User"))

    # ──────────────────────────────────────
    #  3. Or raise on denial
    # ──────────────────────────────────────
    try:
        auth.user(bob).authorize("delete", draft)
    except AccessDeniedError as exc:
        print(f"  [DENIED] action={exc.action}  resource={exc.resource_type}  reason={exc}")


if __name__ == "__main__":
    main()
