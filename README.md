# growbot

The rules of a group-chat growing game. Players grow their length once a day,
fight each other for it, take out loans, redeem promo codes and import their
results from other bots. The package holds the pieces of that logic that need
no chat connection and no database, so a bot front end can call them directly.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## What is inside

- `growbot.domain`
  - `LanguageCode.from_maybe_string()` falls back to `"en"` when it is given no
    code. `to_supported_language()` maps `ru`, `uk` and `be` codes to
    `SupportedLanguage.RU` and every other code to `SupportedLanguage.EN`.
  - `Ratio` accepts only values from 0 to 1. Any other value raises
    `InvalidRatioValue`.
  - `Username.escaped()` removes Unicode format characters and wraps the name
    in left-to-right marks. It then escapes `&`, `<` and `>` for HTML.
- `growbot.config.env`
  - `get_env_mandatory_value()` raises `MissingEnvironmentVariable` when the
    variable is not set.
  - `get_env_value_or_default()` returns the default when the variable is unset
    or cannot be parsed.
  - `get_optional_env_ratio()` returns `None` for a missing or out-of-range
    ratio.
- `growbot.config.toggles`
  - `FeatureToggles`, `BattlesFeatureToggles` and `DickOfDaySelectionMode` hold
    the feature switches.
  - `CachedEnvToggles.enabled(key)` is false while `DISABLE_CMD_<KEY>` is set.
    The answer is remembered after the first check.
- `growbot.config.announcements`
  - `Announcement.create()` attaches a SHA-256 digest to the text. It returns
    `None` for empty text.
  - `AnnouncementsConfig.get()` picks the announcement for a user's language.
- `growbot.config.app` provides `AppConfig.from_env()` and
  `DatabaseConfig.from_env()`.
- `growbot.config.help`
  - `build_help_context()` fills a `HelpContext` for the help messages.
  - `ensure_starts_with_at_sign()` prefixes a name with `@` when it has none.
- `growbot.handlers.importing`
  - `parse_top()` reads the top list of `@pipisabot` or `@kraft28_bot`. It
    raises `InvalidLines` for lines it cannot recognise.
  - `plan_import()` matches the list against the chat members. It sorts the
    users into imported, already present and not found.
- `growbot.handlers.promo`
  - `is_valid_promo_code()` accepts 4–16 letters, digits, `_` and `-`.
  - `encode_promo_start_param()`, `decode_promo_start_param()` and
    `decode_promo_code()` handle the `promo-` deep-link parameter, written as
    unpadded URL-safe base64.
  - `chats_in_russian()` and `success_suffix()` choose the wording of the
    success message.
- `growbot.handlers.callback_data`
  - `CallbackData` is the base of the inline-button payloads. Each payload is
    written out as `prefix:...` with `to_data_string()` and read back with
    `parse()`. A malformed payload raises `InvalidCallbackData`.
  - `HandlerImplResult.keyboard()` turns a list of `CallbackButton`s into one
    row of `(title, data)` pairs.
- `growbot.handlers.loan`
  - `LoanCallbackData` carries a `LoanConfirmed` or `LoanRefused` action.
    Older data that has no payout ratio parses with a ratio of `0.0`.
  - `debt_for_length()` works out the debt for a negative length.
    `format_payout_percentage()` formats the payout ratio for display.
- `growbot.handlers.perks`
  - `HelpPussiesPerk` returns a share of a negative length as extra growth.
  - `loan_payout()` works out how much of a positive increment repays a loan.
- `growbot.handlers.pvp`
  - `BattleCallbackData` is the payload of the battle button.
  - `new_short_timestamp()` counts milliseconds from 2024-06-22 UTC.
  - `choose_winner()` picks a winner with even odds and returns
    `(winner, loser)`.
  - `loan_withholding()` works out how much of an award repays the winner's
    loan.
  - `is_bet_query()` checks that an inline query is a number that fits in
    32 bits.
- `growbot.handlers.mercy`
  - `MercyCallbackData` is the payload of the winner's mercy buttons.
  - `split_bet()` divides the bet between winner and loser for each
    `MercyAction`.
- `growbot.handlers.events`
  - `get_current_event()` and `get_upcoming_event()` look up the twelve
    `MONTHLY_EVENTS`.
  - `days_in_month()` and `days_until_month_end()` do the calendar
    arithmetic.
  - `get_event_modifier()` returns the multiplier an event applies to an
    `EventAction`.
- `growbot.handlers.achievements`
  - `ACHIEVEMENTS` lists the achievements and their targets.
    `default_achievements()` returns them with no progress made.
  - `UserAchievement.progress_text()` describes the progress on one
    achievement.
  - `check_achievements()` returns the achievements an action unlocks.
- `growbot.handlers.referral`
  - `referral_code()` builds a stable `SPROUT-NAME-XXX` code.
  - `claim_referral_reward()` returns the referrer's reward as
    `(centimetres, sunbeams)`.
- `growbot.commands`
  - `commands_for_scope()` lists the menu commands for a `CommandScope`,
    leaving out the disabled ones.
  - Each `BotCommand` carries the translation key of its description, not the
    translated text.

## Example

```python
from growbot.domain import LanguageCode, SupportedLanguage
from growbot.handlers.promo import is_valid_promo_code, encode_promo_start_param
from growbot.handlers.loan import LoanCallbackData, LoanConfirmed

assert LanguageCode.from_maybe_string("ru-RU").to_supported_language() is SupportedLanguage.RU
assert is_valid_promo_code("TESTPROMO")
assert encode_promo_start_param("TEST_CODE") == "promo-VEVTVF9DT0RF"

data = LoanCallbackData(uid=123456, action=LoanConfirmed(value=10, payout_ratio=0.1))
assert data.to_data_string() == "loan:123456:confirmed:10:0.1"
assert LoanCallbackData.parse("loan:123456:refused").uid == 123456
```

## Configuration

`AppConfig.from_env()` reads the following variables. It falls back to the
default when a variable is unset or invalid. Booleans must be written as `true`
or `false`.

| Variable | Default |
| --- | --- |
| `TOP_LIMIT` | `10` |
| `LOAN_PAYOUT_COEF` | `0.0` |
| `DOD_SELECTION_MODE` | `RANDOM` (also `WEIGHTS`, `EXCLUSION`) |
| `DOD_RICH_EXCLUSION_RATIO` | unset: disabled unless the value is from 0 to 1 |
| `CHATS_MERGING_ENABLED` | `false` |
| `TOP_UNLIMITED_ENABLED` | `false` |
| `MULTIPLE_LOANS_ENABLED` | `false` |
| `PVP_DEFAULT_BET` | `1` |
| `PVP_CHECK_ACCEPTOR_LENGTH` | `false` |
| `PVP_CALLBACK_LOCKS_ENABLED` | `true` |
| `PVP_STATS_SHOW` | `true` |
| `PVP_STATS_SHOW_NOTICE` | `true` |
| `ANNOUNCEMENT_MAX_SHOWS` | `0` |
| `ANNOUNCEMENT_EN` | empty: no announcement |
| `ANNOUNCEMENT_RU` | empty: no announcement |

`DatabaseConfig.from_env()` needs `DATABASE_URL` to be set to an absolute URL.
It also reads `DATABASE_MAX_CONNECTIONS`, which defaults to `10`.

`build_help_context()` needs `HELP_ADMIN_CHANNEL_RU`, `HELP_ADMIN_CHANNEL_EN`,
`HELP_ADMIN_CHAT_RU`, `HELP_ADMIN_CHAT_EN` and `HELP_GIT_REPO`.

## What this package does not do

- It does not connect to a chat service, receive updates or send messages.
- It does not store players, lengths, loans or statistics. Nothing is kept in a
  database, and no function reads from or writes to one.
- It holds no message texts or translations. It returns translation keys,
  values and button payloads for a front end to render.
- It has no command-line program or server to start.