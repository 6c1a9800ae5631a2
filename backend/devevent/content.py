"""
Static content: featured example events and the site navigation.

The featured events are illustrative fixtures for populating the UI; they are
not stored in the database and their ids are not event identities.
"""

from typing import Optional

from devevent.schemas.content import Navigation, NavLink, SeedEvent

FEATURED_EVENTS: tuple[SeedEvent, ...] = (
    SeedEvent(
        id="nextjs-conf-2026",
        title="Next.js Conf 2026",
        image="/images/event1.png",
        location="San Francisco, CA, USA",
        date="2026-02-18",
        time="09:00",
        description="Annual Next.js conference with core team talks, case studies, and ecosystem workshops.",
        url="https://nextjs.org/conf",
    ),
    SeedEvent(
        id="react-summit-2026",
        title="React Summit 2026",
        image="/images/event2.png",
        location="Amsterdam, Netherlands",
        date="2026-03-10",
        time="09:30",
        description="Global React conference — deep-dive sessions on React, concurrent rendering, and ecosystem patterns.",
        url="https://reactsummit.com",
    ),
    SeedEvent(
        id="aws-reinvent-2025",
        title="AWS re:Invent 2025",
        image="/images/event3.png",
        location="Las Vegas, NV, USA",
        date="2025-11-25",
        time="08:00",
        description="Large cloud conference covering AWS product updates, architecture patterns, and hands-on labs.",
        url="https://reinvent.aws",
    ),
    SeedEvent(
        id="kubecon-2026",
        title="KubeCon + CloudNativeCon 2026",
        image="/images/event4.png",
        location="Barcelona, Spain",
        date="2026-04-22",
        time="09:00",
        description="The Cloud Native community event — Kubernetes, service mesh, observability, and edge topics.",
        url="https://events.linuxfoundation.org/kubecon-cloudnativecon/",
    ),
    SeedEvent(
        id="jsconf-eu-2026",
        title="JSConf EU 2026",
        image="/images/event5.png",
        location="Berlin, Germany",
        date="2026-05-14",
        time="10:00",
        description="Independent JavaScript conference with community talks on language improvements, tooling, and best practices.",
        url="https://jsconf.com",
    ),
    SeedEvent(
        id="mlh-hackathon-finale-2026",
        title="Major League Hacking — Global Hackathon Finale",
        image="/images/event6.png",
        location="Online & City Hubs",
        date="2026-07-03",
        time="12:00",
        description="Hackathon focused on student-built projects, workshops, and startup matchmaking. Great for portfolio work.",
        url="https://mlh.io",
    ),
)

NAVIGATION = Navigation(
    brand="DevEvent",
    logo="/icons/logo.png",
    links=[
        NavLink(label="Home", href="/"),
        NavLink(label="Events", href="/events"),
        NavLink(label="Create Event", href="/create-event"),
    ],
)


def get_featured_event(event_id: str) -> Optional[SeedEvent]:
    for event in FEATURED_EVENTS:
        if event.id == event_id:
            return event
    return None
