"""Built-in app and URL rule catalogs.

Order is part of the contract: bump the version when rules are added,
removed, or moved.
"""

from __future__ import annotations

import re

from focusmeter.models import NEUTRAL, PRODUCTIVE, UNPRODUCTIVE
from focusmeter.rules import APP, URL, RuleTable, app_rule, url_rule

APP_RULES_VERSION = "2024.1"
URL_RULES_VERSION = "2024.1"


def _rx(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern, re.IGNORECASE)


_BROWSERS = _rx(r"^(chrome|firefox|safari|msedge|edge|brave|opera)")

DEFAULT_APP_RULES = RuleTable(
    kind=APP,
    version=APP_RULES_VERSION,
    rules=(
        # -- Development tools --
        app_rule(_rx(r"^code$"), PRODUCTIVE),  # VS Code
        app_rule(_rx(r"^code\.exe$"), PRODUCTIVE),
        app_rule(_rx(r"^webstorm"), PRODUCTIVE),
        app_rule(_rx(r"^intellij"), PRODUCTIVE),
        app_rule(_rx(r"^pycharm"), PRODUCTIVE),
        app_rule(_rx(r"^sublime_text"), PRODUCTIVE),
        app_rule(_rx(r"^atom$"), PRODUCTIVE),
        app_rule(_rx(r"^vim$"), PRODUCTIVE),
        app_rule(_rx(r"^nvim$"), PRODUCTIVE),
        app_rule(_rx(r"^emacs"), PRODUCTIVE),
        app_rule(_rx(r"^cursor$"), PRODUCTIVE),
        app_rule(_rx(r"^rider"), PRODUCTIVE),
        app_rule(_rx(r"^clion"), PRODUCTIVE),
        app_rule(_rx(r"^goland"), PRODUCTIVE),
        app_rule(_rx(r"^phpstorm"), PRODUCTIVE),
        app_rule(_rx(r"^rubymine"), PRODUCTIVE),
        app_rule(_rx(r"^android studio"), PRODUCTIVE),
        app_rule(_rx(r"^xcode"), PRODUCTIVE),
        app_rule(_rx(r"^visual studio"), PRODUCTIVE),  # also "Visual Studio Code"
        app_rule(_rx(r"^eclipse"), PRODUCTIVE),
        app_rule(_rx(r"^netbeans"), PRODUCTIVE),
        # -- Office & notes --
        app_rule(_rx(r"^winword"), PRODUCTIVE),
        app_rule(_rx(r"^word$"), PRODUCTIVE),
        app_rule(_rx(r"^excel"), PRODUCTIVE),
        app_rule(_rx(r"^powerpnt"), PRODUCTIVE),
        app_rule(_rx(r"^powerpoint$"), PRODUCTIVE),
        app_rule(_rx(r"^outlook"), PRODUCTIVE),
        app_rule(_rx(r"^onenote"), PRODUCTIVE),
        app_rule(_rx(r"^notion"), PRODUCTIVE),
        app_rule(_rx(r"^obsidian"), PRODUCTIVE),
        app_rule(_rx(r"^roam research"), PRODUCTIVE),
        app_rule(_rx(r"^logseq"), PRODUCTIVE),
        app_rule(_rx(r"^remnote"), PRODUCTIVE),
        app_rule(_rx(r"^evernote"), PRODUCTIVE),
        # -- Design --
        app_rule(_rx(r"^figma"), PRODUCTIVE),
        app_rule(_rx(r"^sketch"), PRODUCTIVE),
        app_rule(_rx(r"^photoshop"), PRODUCTIVE),
        app_rule(_rx(r"^illustrator"), PRODUCTIVE),
        app_rule(_rx(r"^indesign"), PRODUCTIVE),
        app_rule(_rx(r"^xd$"), PRODUCTIVE),
        app_rule(_rx(r"^after effects"), PRODUCTIVE),
        app_rule(_rx(r"^premiere"), PRODUCTIVE),
        app_rule(_rx(r"^blender"), PRODUCTIVE),
        app_rule(_rx(r"^cinema 4d"), PRODUCTIVE),
        app_rule(_rx(r"^maya"), PRODUCTIVE),
        app_rule(_rx(r"^3ds max"), PRODUCTIVE),
        # -- Terminals & devops --
        app_rule(_rx(r"^terminal$"), PRODUCTIVE),
        app_rule(_rx(r"^iterm"), PRODUCTIVE),
        app_rule(_rx(r"^windows terminal"), PRODUCTIVE),
        app_rule(_rx(r"^wt\.exe$"), PRODUCTIVE),
        app_rule(_rx(r"^powershell"), PRODUCTIVE),
        app_rule(_rx(r"^pwsh"), PRODUCTIVE),
        app_rule(_rx(r"^cmd\.exe$"), PRODUCTIVE),
        app_rule(_rx(r"^wsl"), PRODUCTIVE),
        app_rule(_rx(r"^docker"), PRODUCTIVE),
        app_rule(_rx(r"^postman"), PRODUCTIVE),
        app_rule(_rx(r"^insomnia"), PRODUCTIVE),
        app_rule(_rx(r"^dbeaver"), PRODUCTIVE),
        app_rule(_rx(r"^tableplus"), PRODUCTIVE),
        app_rule(_rx(r"^datagrip"), PRODUCTIVE),
        # -- Project management --
        app_rule(_rx(r"^jira"), PRODUCTIVE),
        app_rule(_rx(r"^confluence"), PRODUCTIVE),
        app_rule(_rx(r"^linear"), PRODUCTIVE),
        app_rule(_rx(r"^asana"), PRODUCTIVE),
        app_rule(_rx(r"^trello"), PRODUCTIVE),
        app_rule(_rx(r"^monday"), PRODUCTIVE),
        app_rule(_rx(r"^clickup"), PRODUCTIVE),
        app_rule(_rx(r"^airtable"), PRODUCTIVE),
        # -- Browsers: neutral, so the URL decides --
        app_rule(_rx(r"^chrome"), NEUTRAL),
        app_rule(_rx(r"^firefox"), NEUTRAL),
        app_rule(_rx(r"^safari"), NEUTRAL),
        app_rule(_rx(r"^msedge"), NEUTRAL),
        app_rule(_rx(r"^edge"), NEUTRAL),
        app_rule(_rx(r"^brave"), NEUTRAL),
        app_rule(_rx(r"^opera"), NEUTRAL),
        app_rule(_rx(r"^vivaldi"), NEUTRAL),
        app_rule(_rx(r"^arc"), NEUTRAL),
        # -- Communication --
        app_rule(_rx(r"^slack"), NEUTRAL),
        app_rule(_rx(r"^teams"), NEUTRAL),
        app_rule(_rx(r"^zoom"), NEUTRAL),
        app_rule(_rx(r"^discord"), NEUTRAL),
        app_rule(_rx(r"^whatsapp"), NEUTRAL),
        app_rule(_rx(r"^telegram"), NEUTRAL),
        app_rule(_rx(r"^signal"), NEUTRAL),
        app_rule(_rx(r"^skype"), NEUTRAL),
        app_rule(_rx(r"^webex"), NEUTRAL),
        app_rule(_rx(r"^gotomeeting"), NEUTRAL),
        app_rule(_rx(r"^google meet"), NEUTRAL),
        app_rule(_rx(r"^microsoft teams"), NEUTRAL),
        # -- Entertainment --
        app_rule(_rx(r"^spotify"), UNPRODUCTIVE, weight=0.8),  # music while working
        app_rule(_rx(r"^netflix"), UNPRODUCTIVE),
        app_rule(_rx(r"^steam"), UNPRODUCTIVE),
        app_rule(_rx(r"^epicgameslauncher"), UNPRODUCTIVE),
        app_rule(_rx(r"^battle\.net"), UNPRODUCTIVE),
        app_rule(_rx(r"^origin"), UNPRODUCTIVE),
        app_rule(_rx(r"^uplay"), UNPRODUCTIVE),
        app_rule(_rx(r"^discord"), UNPRODUCTIVE, title=_rx(r"gaming|game|stream")),
        app_rule(_rx(r"^twitch"), UNPRODUCTIVE),
        app_rule(_rx(r"^obs$"), NEUTRAL),
        # -- Social --
        app_rule(_rx(r"^instagram"), UNPRODUCTIVE),
        app_rule(_rx(r"^facebook"), UNPRODUCTIVE),
        app_rule(_rx(r"^twitter"), UNPRODUCTIVE),
        app_rule(_rx(r"^tiktok"), UNPRODUCTIVE),
        app_rule(_rx(r"^snapchat"), UNPRODUCTIVE),
        app_rule(_rx(r"^reddit"), UNPRODUCTIVE),
        app_rule(_rx(r"^pinterest"), UNPRODUCTIVE),
        app_rule(_rx(r"^linkedin"), NEUTRAL),
        # -- Browser title overrides --
        app_rule(_BROWSERS, UNPRODUCTIVE, title=_rx(r"youtube|netflix|twitch|hulu|disney\+|prime video")),
        app_rule(_BROWSERS, PRODUCTIVE, title=_rx(r"github|stackoverflow|docs\.|developer\.|learn\.|tutorial")),
        app_rule(_BROWSERS, UNPRODUCTIVE, title=_rx(r"facebook|instagram|twitter|tiktok|snapchat")),
    ),
)


DEFAULT_URL_RULES = RuleTable(
    kind=URL,
    version=URL_RULES_VERSION,
    rules=(
        # -- Development & documentation --
        url_rule("github.com", PRODUCTIVE),
        url_rule("gitlab.com", PRODUCTIVE),
        url_rule("bitbucket.org", PRODUCTIVE),
        url_rule("stackoverflow.com", PRODUCTIVE),
        url_rule("stackexchange.com", PRODUCTIVE),
        url_rule("developer.mozilla.org", PRODUCTIVE),
        url_rule("docs.microsoft.com", PRODUCTIVE),
        url_rule("cloud.google.com", PRODUCTIVE),
        url_rule("aws.amazon.com", PRODUCTIVE),
        url_rule("azure.microsoft.com", PRODUCTIVE),
        url_rule("npmjs.com", PRODUCTIVE),
        url_rule("pypi.org", PRODUCTIVE),
        url_rule("crates.io", PRODUCTIVE),
        url_rule("nuget.org", PRODUCTIVE),
        url_rule(_rx(r"^docs\..+"), PRODUCTIVE),
        url_rule(_rx(r".*\.readthedocs\.io"), PRODUCTIVE),
        url_rule(_rx(r".*\.github\.io"), PRODUCTIVE),
        url_rule("dev.to", PRODUCTIVE),
        url_rule("medium.com", PRODUCTIVE, path=_rx(r"/@.*/.*(code|dev|tech|programming|software)")),
        url_rule("hackernoon.com", PRODUCTIVE),
        url_rule("freecodecamp.org", PRODUCTIVE),
        url_rule("codecademy.com", PRODUCTIVE),
        url_rule("w3schools.com", PRODUCTIVE),
        url_rule("mdn.io", PRODUCTIVE),
        url_rule("caniuse.com", PRODUCTIVE),
        # -- Design & productivity tools --
        url_rule("figma.com", PRODUCTIVE),
        url_rule("notion.so", PRODUCTIVE),
        url_rule("airtable.com", PRODUCTIVE),
        url_rule("trello.com", PRODUCTIVE),
        url_rule("asana.com", PRODUCTIVE),
        url_rule("linear.app", PRODUCTIVE),
        url_rule("jira.atlassian.com", PRODUCTIVE),
        url_rule("confluence.atlassian.com", PRODUCTIVE),
        url_rule("monday.com", PRODUCTIVE),
        url_rule("clickup.com", PRODUCTIVE),
        url_rule("miro.com", PRODUCTIVE),
        url_rule("whimsical.com", PRODUCTIVE),
        url_rule("draw.io", PRODUCTIVE),
        url_rule("diagrams.net", PRODUCTIVE),
        # -- Learning --
        url_rule("coursera.org", PRODUCTIVE),
        url_rule("udemy.com", PRODUCTIVE),
        url_rule("pluralsight.com", PRODUCTIVE),
        url_rule("leetcode.com", PRODUCTIVE),
        url_rule("hackerrank.com", PRODUCTIVE),
        url_rule("codewars.com", PRODUCTIVE),
        url_rule("exercism.io", PRODUCTIVE),
        url_rule("khanacademy.org", PRODUCTIVE),
        url_rule("edx.org", PRODUCTIVE),
        url_rule("udacity.com", PRODUCTIVE),
        # -- Cloud & infrastructure --
        url_rule("vercel.com", PRODUCTIVE),
        url_rule("netlify.com", PRODUCTIVE),
        url_rule("heroku.com", PRODUCTIVE),
        url_rule("digitalocean.com", PRODUCTIVE),
        url_rule("linode.com", PRODUCTIVE),
        url_rule("cloudflare.com", PRODUCTIVE),
        url_rule("docker.com", PRODUCTIVE),
        url_rule("kubernetes.io", PRODUCTIVE),
        # -- Search & communication --
        url_rule("google.com", NEUTRAL),
        url_rule("duckduckgo.com", NEUTRAL),
        url_rule("bing.com", NEUTRAL),
        url_rule("mail.google.com", NEUTRAL),
        url_rule("gmail.com", NEUTRAL),
        url_rule("outlook.office.com", NEUTRAL),
        url_rule("outlook.live.com", NEUTRAL),
        url_rule("slack.com", NEUTRAL),
        url_rule("teams.microsoft.com", NEUTRAL),
        url_rule("zoom.us", NEUTRAL),
        url_rule("webex.com", NEUTRAL),
        url_rule("gotomeeting.com", NEUTRAL),
        url_rule("meet.google.com", NEUTRAL),
        # -- Reference --
        url_rule("wikipedia.org", NEUTRAL),
        url_rule("medium.com", NEUTRAL),
        url_rule(
            "reddit.com",
            NEUTRAL,
            path=_rx(r"/r/(programming|webdev|javascript|python|learnprogramming|MachineLearning|web_design)"),
            weight=0.6,
        ),
        url_rule(
            "youtube.com",
            PRODUCTIVE,
            path=_rx(r"/playlist.*list=.*(learn|tutorial|course|training)"),
            weight=0.8,
        ),
        url_rule(
            "youtube.com",
            NEUTRAL,
            path=_rx(r"/watch\?v=.*(tutorial|course|learn|how to|guide)"),
            weight=0.6,
        ),
        # -- Social --
        url_rule("facebook.com", UNPRODUCTIVE),
        url_rule("instagram.com", UNPRODUCTIVE),
        url_rule("twitter.com", UNPRODUCTIVE),
        url_rule("x.com", UNPRODUCTIVE),
        url_rule("tiktok.com", UNPRODUCTIVE),
        url_rule("snapchat.com", UNPRODUCTIVE),
        url_rule("pinterest.com", UNPRODUCTIVE),
        url_rule("reddit.com", UNPRODUCTIVE, weight=0.3),
        url_rule("linkedin.com", NEUTRAL, path=_rx(r"/feed|/in/|/company/")),
        url_rule("linkedin.com", UNPRODUCTIVE),
        # -- Entertainment --
        url_rule("youtube.com", UNPRODUCTIVE, weight=0.2),
        url_rule("netflix.com", UNPRODUCTIVE),
        url_rule("twitch.tv", UNPRODUCTIVE),
        url_rule("hulu.com", UNPRODUCTIVE),
        url_rule("disneyplus.com", UNPRODUCTIVE),
        url_rule("primevideo.com", UNPRODUCTIVE),
        url_rule("hbo.com", UNPRODUCTIVE),
        url_rule("hbonow.com", UNPRODUCTIVE),
        url_rule("crunchyroll.com", UNPRODUCTIVE),
        url_rule("funimation.com", UNPRODUCTIVE),
        # -- Gaming --
        url_rule("steamcommunity.com", UNPRODUCTIVE),
        url_rule("steampowered.com", UNPRODUCTIVE),
        url_rule("epicgames.com", UNPRODUCTIVE),
        url_rule("battle.net", UNPRODUCTIVE),
        url_rule("origin.com", UNPRODUCTIVE),
        url_rule("uplay.com", UNPRODUCTIVE),
        url_rule("roblox.com", UNPRODUCTIVE),
        url_rule("minecraft.net", UNPRODUCTIVE),
        # -- News & distractions --
        url_rule("buzzfeed.com", UNPRODUCTIVE),
        url_rule("tmz.com", UNPRODUCTIVE),
        url_rule("dailymail.co.uk", UNPRODUCTIVE),
        url_rule("thesun.co.uk", UNPRODUCTIVE),
    ),
)
