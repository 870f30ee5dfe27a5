"""Mock dataset served by the in-memory repository."""

from __future__ import annotations

from typing import Dict, List, Tuple

from blogspace.shared.domain.models import Comment, Post, User

DEMO_PASSWORD = "password"

_AVATAR = "https://images.pexels.com/photos/{}/pexels-photo-{}.jpeg?auto=compress&cs=tinysrgb&w=100&h=100&fit=crop"

USERS: Dict[str, User] = {
    "demo": User(
        id="1",
        username="demo",
        email="demo@example.com",
        avatar=_AVATAR.format(220453, 220453),
    ),
    "johndoe": User(
        id="2",
        username="johndoe",
        email="john@example.com",
        avatar=_AVATAR.format(614810, 614810),
    ),
    "sarah.tech": User(
        id="3",
        username="sarah.tech",
        email="sarah@example.com",
        avatar=_AVATAR.format(1239291, 1239291),
    ),
    "developer123": User(
        id="4",
        username="developer123",
        email="dev@example.com",
        avatar=_AVATAR.format(1181686, 1181686),
    ),
    "webdev_pro": User(
        id="5",
        username="webdev_pro",
        email="pro@example.com",
        avatar=_AVATAR.format(1580271, 1580271),
    ),
}

_REACT_CONTENT = "\n\n".join([
    "React has revolutionized the way we build user interfaces, offering a component-based "
    "architecture that promotes reusability and maintainability. In this comprehensive guide, "
    "we'll explore the fundamental concepts of React development, from setting up your first "
    "project to understanding the component lifecycle.",
    "The journey begins with understanding JSX, React's syntax extension that allows you to write "
    "HTML-like code within JavaScript. This powerful feature enables developers to create dynamic "
    "and interactive user interfaces with ease. We'll cover how to create functional and class "
    "components, manage state effectively, and handle user interactions.",
    "One of React's greatest strengths is its virtual DOM implementation, which optimizes rendering "
    "performance by minimizing direct manipulation of the actual DOM. This results in faster, more "
    "responsive applications that can handle complex state changes without sacrificing user experience.",
    "Throughout this article, we'll build practical examples that demonstrate best practices in React "
    "development, including proper component organization, state management patterns, and effective "
    "use of React hooks. Whether you're a beginner or looking to strengthen your React skills, this "
    "guide will provide valuable insights and practical knowledge.",
])

_TRENDS_CONTENT = "\n\n".join([
    "The web development landscape is constantly evolving, with new technologies and methodologies "
    "emerging to address the growing demands of modern applications. As we look toward the future, "
    "several key trends are shaping how we build and deploy web applications.",
    "Progressive Web Applications (PWAs) continue to gain traction, offering native app-like "
    "experiences through web technologies. These applications combine the best of web and mobile "
    "apps, providing offline functionality, push notifications, and seamless performance across devices.",
    "The rise of edge computing is transforming how we think about application architecture and "
    "deployment. By processing data closer to users, edge computing reduces latency and improves "
    "performance, making it ideal for real-time applications and global-scale services.",
    "WebAssembly (WASM) is opening new possibilities for web applications, allowing developers to run "
    "high-performance code in browsers. This technology enables complex applications that were "
    "previously limited to native platforms to run efficiently on the web.",
])


def build_seed_posts() -> List[Post]:
    """Posts in feed order, most recent first."""
    return [
        Post(
            id="1",
            title="Getting Started with React Development",
            content=_REACT_CONTENT,
            excerpt=(
                "React has revolutionized the way we build user interfaces, offering a component-based "
                "architecture that promotes reusability and maintainability."
            ),
            author=USERS["johndoe"],
            created_at="2024-01-15T10:30:00Z",
            updated_at="2024-01-15T10:30:00Z",
            tags=("React", "JavaScript", "Web Development"),
            likes=24,
            is_liked=False,
        ),
        Post(
            id="2",
            title="The Future of Web Development: Trends to Watch",
            content=_TRENDS_CONTENT,
            excerpt=(
                "The web development landscape is constantly evolving, with new technologies and "
                "methodologies emerging to address the growing demands of modern applications."
            ),
            author=USERS["sarah.tech"],
            created_at="2024-01-14T14:20:00Z",
            updated_at="2024-01-14T14:20:00Z",
            tags=("Web Development", "Technology", "Future Trends"),
            likes=18,
            is_liked=True,
        ),
    ]


def build_seed_comments() -> List[Comment]:
    """Comments in chronological order, oldest first."""
    return [
        Comment(
            id="1",
            content="Great article! Really helped me understand React hooks better.",
            author=USERS["developer123"],
            post_id="1",
            created_at="2024-01-15T12:00:00Z",
            likes=5,
            is_liked=False,
        ),
        Comment(
            id="2",
            content="The section on virtual DOM was particularly insightful. Thanks for sharing!",
            author=USERS["webdev_pro"],
            post_id="1",
            created_at="2024-01-15T13:30:00Z",
            likes=3,
            is_liked=True,
        ),
    ]


def build_seed_credentials() -> List[Tuple[User, str]]:
    """Every seeded account signs in with the demo password."""
    return [(user, DEMO_PASSWORD) for user in USERS.values()]
