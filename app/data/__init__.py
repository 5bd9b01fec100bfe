# Fixture data package init
