#!/usr/bin/env python3
#
# <bitbar.title>GitHub - Show Open PRs</bitbar.title>
# <bitbar.version>v2.0</bitbar.version>
# <bitbar.author>John Bates</bitbar.author>
# <bitbar.author.github>devstuff</bitbar.author.github>
# <bitbar.desc>Lists open PRs that involve you or one of your teams</bitbar.desc>
# <bitbar.dependencies>python3, github-open-prs</bitbar.dependencies>
# <bitbar.abouturl>http://github.com/devstuff/</bitbar.abouturl>
#
# Copy or symlink into the plugins folder. The "5m" in the file name is the
# refresh period; rename to change it. Settings are read from
# ~/.github-open-prs.yaml:
#
#   ---
#   api_host_url: "https://api.github.com"
#   api_token: xxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxx
#   search_days: 7
#   teams:
#     - OWNER/TEAM_A
#     - OWNER/TEAM_B
#   user_name: MY_GITHUB_USER_NAME
#
# The token needs the "repo" (or "public_repo") and "read:org" scopes.

from open_prs.cli import main

if __name__ == "__main__":
    main()
