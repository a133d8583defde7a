"""Unit tests for the news blog observer."""

from notifications import NewsBlog, NewsFan, Subscriber


class RecordingSubscriber(Subscriber):

    def __init__(self, name, log):
        self.name = name
        self._log = log

    def notify(self, article: str) -> None:
        self._log.append((self.name, article))


class TestNewsFan:

    def test_notify_prints_acknowledgment(self, read_lines) -> None:
        NewsFan("Андрій").notify("Огляд фіналу NBA 2025")
        assert read_lines() == ['Андрій отримав сповіщення: нова новина - "Огляд фіналу NBA 2025"']


class TestNewsBlog:

    def test_fan_out_in_subscription_order(self, blog, fans, read_lines) -> None:
        for fan in fans:
            blog.subscribe(fan)

        blog.publish_article("T")

        assert read_lines() == [
            "Блог SportLife опублікував новину: T",
            'A отримав сповіщення: нова новина - "T"',
            'B отримав сповіщення: нова новина - "T"',
            'C отримав сповіщення: нова новина - "T"',
        ]

    def test_publish_without_subscribers(self, blog, read_lines) -> None:
        blog.publish_article("T")
        assert read_lines() == ["Блог SportLife опублікував новину: T"]

    def test_unsubscribe_removes_exactly_one_recipient(self, blog) -> None:
        log = []
        a = RecordingSubscriber("A", log)
        b = RecordingSubscriber("B", log)
        blog.subscribe(a)
        blog.subscribe(b)

        blog.unsubscribe(a)
        blog.publish_article("T")

        assert log == [("B", "T")]

    def test_unsubscribe_absent_is_noop(self, blog) -> None:
        log = []
        a = RecordingSubscriber("A", log)
        blog.subscribe(a)

        blog.unsubscribe(RecordingSubscriber("stranger", log))
        blog.publish_article("T")

        assert log == [("A", "T")]
        assert blog.subscribers == (a,)

    def test_duplicate_subscription_notifies_twice(self, blog) -> None:
        log = []
        a = RecordingSubscriber("A", log)
        blog.subscribe(a)
        blog.subscribe(a)
        blog.publish_article("T")
        assert log == [("A", "T"), ("A", "T")]

        blog.unsubscribe(a)
        assert len(blog) == 1

    def test_unsubscribe_during_publish_applies_to_next_article(self, blog) -> None:
        """Notifications reflect the subscriber set at the start of publish."""
        log = []
        b = RecordingSubscriber("B", log)

        class Remover(Subscriber):
            def notify(self, article: str) -> None:
                log.append(("remover", article))
                blog.unsubscribe(b)

        blog.subscribe(Remover())
        blog.subscribe(b)

        blog.publish_article("first")
        blog.publish_article("second")

        assert log == [("remover", "first"), ("B", "first"), ("remover", "second")]

    def test_subscribe_during_publish_applies_to_next_article(self, blog) -> None:
        log = []
        late = RecordingSubscriber("late", log)

        class Recruiter(Subscriber):
            def notify(self, article: str) -> None:
                if late not in blog.subscribers:
                    blog.subscribe(late)

        blog.subscribe(Recruiter())
        blog.publish_article("first")
        assert log == []

        blog.publish_article("second")
        assert log == [("late", "second")]

    def test_subscribers_view_is_read_only_snapshot(self, blog, fans) -> None:
        blog.subscribe(fans[0])
        view = blog.subscribers
        blog.subscribe(fans[1])
        assert view == (fans[0],)
        assert blog.subscribers == fans[:2]
