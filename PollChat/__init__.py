"""
    ____        ________          __
   / __ \____  / / / ____/_  ____ _/ /_
  / /_/ / __ \/ / / /   / __ \/ __ `/ __/
 / ____/ /_/ / / / /___/ / / / /_/ / /_
/_/    \____/_/_/\____/_/ /_/\__,_/\__/

PollChat Project - a minimal networked chat: a terminal client that polls a
shared message log, and a tiny HTTP server that keeps it.

License: Apache-2.0 License
"""

__version__ = "1.0.0"
