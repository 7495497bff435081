"""Game rules and inline-button payloads: imports, promo codes, loans, perks, battles, mercy, events, achievements and referrals."""