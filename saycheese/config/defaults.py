"""Built-in source lists used when no sources.yaml is present."""

from typing import List

from ..models import Platform, Priority
from .models import FeedSource, SourcesModel, SubredditSource


def create_default_telugu_feeds() -> List[FeedSource]:
    """Telugu cinema and regional news feeds."""
    return [
        FeedSource(name="123Telugu", url="https://www.123telugu.com/feed", priority=Priority.HIGH, category="cinema"),
        FeedSource(
            name="GreatAndhra",
            url="https://www.greatandhra.com/rss",
            backup_urls=["https://greatandhra.com/rss/", "https://feeds.feedburner.com/greatandhra"],
            priority=Priority.HIGH,
            category="mixed",
        ),
        FeedSource(name="Gulte", url="https://www.gulte.com/rss", priority=Priority.HIGH, category="mixed"),
        FeedSource(name="Tupaki", url="https://english.tupaki.com/feed", category="mixed"),
        FeedSource(name="CineJosh", url="https://www.cinejosh.com/rss.xml", category="cinema"),
        FeedSource(
            name="FilmiBeat Telugu",
            url="https://www.filmibeat.com/rss/telugu-movie-news.xml",
            backup_urls=["https://www.filmibeat.com/rss/news/telugu.xml"],
            category="cinema",
        ),
        FeedSource(
            name="IndiaGlitz Telugu",
            url="https://www.indiaglitz.com/rss/telugu-movie-news.xml",
            backup_urls=["https://www.indiaglitz.com/rss/news/telugu.xml"],
            category="cinema",
        ),
        FeedSource(name="Eenadu", url="https://www.eenadu.net/rss", priority=Priority.HIGH, platform=Platform.NEWS),
        FeedSource(name="Sakshi", url="https://www.sakshi.com/rss", priority=Priority.HIGH, platform=Platform.NEWS),
        FeedSource(
            name="Andhra Jyothy", url="https://www.andhrajyothy.com/rss", priority=Priority.HIGH, platform=Platform.NEWS
        ),
        FeedSource(
            name="TV9 Telugu", url="https://www.tv9telugu.com/rss.xml", priority=Priority.HIGH, platform=Platform.NEWS
        ),
        FeedSource(
            name="Telangana Today", url="https://telanganatoday.com/feed", priority=Priority.LOW, platform=Platform.NEWS
        ),
        FeedSource(name="The Hans India", url="https://www.thehansindia.com/feeds/rss/news", platform=Platform.NEWS),
        FeedSource(
            name="Deccan Chronicle",
            url="https://www.deccanchronicle.com/rss_feeds/hyderabad.xml",
            platform=Platform.NEWS,
        ),
        FeedSource(
            name="Times of India Hyderabad",
            url="https://timesofindia.indiatimes.com/rssfeeds/2950623.cms",
            platform=Platform.NEWS,
        ),
        FeedSource(name="NTV Telugu", url="https://www.ntvtelugu.com/rss", platform=Platform.NEWS),
        FeedSource(name="ETV Telangana", url="https://www.etvtelangana.com/rss", platform=Platform.NEWS),
    ]


def create_default_telugu_subreddits() -> List[SubredditSource]:
    """Telugu community subreddits."""
    return [
        SubredditSource(name="Ni_Bondha", priority=Priority.HIGH),
        SubredditSource(name="tollywood", priority=Priority.HIGH),
        SubredditSource(name="hyderabad"),
        SubredditSource(name="telangana"),
    ]


def create_default_general_feeds() -> List[FeedSource]:
    """India-first general news, business, tech and sports feeds."""
    return [
        FeedSource(name="Times of India", url="https://timesofindia.indiatimes.com/rssfeedstopstories.cms"),
        FeedSource(name="NDTV", url="https://feeds.feedburner.com/ndtvnews-top-stories"),
        FeedSource(name="Hindustan Times", url="https://www.hindustantimes.com/feeds/rss/india-news/index.xml"),
        FeedSource(name="Indian Express", url="https://indianexpress.com/feed/"),
        FeedSource(
            name="Economic Times",
            url="https://economictimes.indiatimes.com/rssfeedstopstories.cms",
            category="business",
        ),
        FeedSource(name="Mint", url="https://www.livemint.com/rss/news", category="business"),
        FeedSource(name="MediaNama", url="https://www.medianama.com/feed/", category="tech"),
        FeedSource(name="YourStory", url="https://yourstory.com/feed", category="tech"),
        FeedSource(name="Cricbuzz", url="https://www.cricbuzz.com/rss-feed/news", category="sports"),
        FeedSource(name="BBC News", url="https://feeds.bbci.co.uk/news/rss.xml", priority=Priority.HIGH),
        FeedSource(name="The Verge", url="https://www.theverge.com/rss/index.xml", category="tech"),
    ]


def create_default_general_subreddits() -> List[SubredditSource]:
    """General and India subreddits."""
    return [
        SubredditSource(name="india", category="news"),
        SubredditSource(name="indiaspeaks", category="news"),
        SubredditSource(name="worldnews", category="news"),
        SubredditSource(name="technology", category="tech"),
        SubredditSource(name="indianstartups", category="tech"),
        SubredditSource(name="cricket", category="sports"),
        SubredditSource(name="bollywood", category="entertainment"),
    ]


def create_default_sources() -> SourcesModel:
    """Full default source configuration."""
    return SourcesModel(
        telugu_feeds=create_default_telugu_feeds(),
        telugu_subreddits=create_default_telugu_subreddits(),
        general_feeds=create_default_general_feeds(),
        general_subreddits=create_default_general_subreddits(),
    )
