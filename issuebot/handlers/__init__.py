"""Decision and formatting logic for the individual triage features."""