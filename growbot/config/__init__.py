"""Settings, feature toggles, announcements and help context read from environment variables."""