"""Forms for the match blueprint."""

from wtforms import (
    SelectField,
    SelectMultipleField,
    StringField,
    ValidationError,
)
from wtforms.validators import DataRequired, InputRequired, NumberRange, Optional

from halisaha.constants import (
    MAX_RATING,
    MIN_MATCH_PLAYERS,
    MIN_RATING,
    POSITIONS,
    SKILL_LEVELS,
)
from halisaha.forms import ApiForm, StrictIntegerField, as_text

from .models import MatchSubmission

MISSING_FIELDS = "Tüm alanları doldurunuz"
RATING_RANGE = f"Puan {MIN_RATING} ile {MAX_RATING} arasında olmalıdır"


class MatchForm(ApiForm):
    """Form for creating a new match listing."""

    venue_name = StringField(
        "Saha Adı",
        name="venueName",
        filters=[as_text],
        validators=[DataRequired(MISSING_FIELDS)],
    )
    location = StringField(
        "Konum", filters=[as_text], validators=[DataRequired(MISSING_FIELDS)]
    )
    date = StringField(
        "Tarih", filters=[as_text], validators=[DataRequired(MISSING_FIELDS)]
    )
    time = StringField(
        "Saat", filters=[as_text], validators=[DataRequired(MISSING_FIELDS)]
    )
    max_players = StrictIntegerField(
        "Oyuncu Sayısı",
        name="maxPlayers",
        invalid_message="Oyuncu sayısı tam sayı olmalıdır",
        validators=[
            InputRequired(MISSING_FIELDS),
            NumberRange(
                min=MIN_MATCH_PLAYERS,
                message=f"Oyuncu sayısı en az {MIN_MATCH_PLAYERS} olmalıdır",
            ),
        ],
    )
    skill_level = SelectField(
        "Seviye",
        name="skillLevel",
        choices=[(s, s) for s in SKILL_LEVELS],
        validate_choice=False,
        validators=[DataRequired(MISSING_FIELDS)],
    )
    price = StrictIntegerField(
        "Fiyat",
        invalid_message="Fiyat tam sayı olmalıdır",
        validators=[NumberRange(min=0, message="Fiyat 0 veya daha büyük olmalıdır")],
    )
    required_positions = SelectMultipleField(
        "Gerekli Mevkiler",
        name="requiredPositions",
        choices=[(p, p) for p in POSITIONS],
        validate_choice=False,
        validators=[Optional()],
    )
    venue_id = StringField(
        "Saha", name="venueId", filters=[as_text], validators=[Optional()]
    )
    image_url = StringField(
        "Görsel", name="imageUrl", filters=[as_text], validators=[Optional()]
    )

    def validate_skill_level(self, field):
        """Normalise the skill level to its canonical spelling."""
        field.data = _canonical(field.data, SKILL_LEVELS, "Geçersiz seviye")

    def validate_required_positions(self, field):
        """Normalise each position and drop repeats."""
        positions = []
        for value in field.data or []:
            position = _canonical(value, POSITIONS, "Geçersiz mevki")
            if position not in positions:
                positions.append(position)
        field.data = positions

    def to_submission(self):
        """Build the MatchSubmission for the service layer."""
        return MatchSubmission(
            venue_name=self.venue_name.data,
            location=self.location.data,
            date=self.date.data,
            time=self.time.data,
            max_players=self.max_players.data,
            skill_level=self.skill_level.data,
            price=self.price.data,
            required_positions=list(self.required_positions.data or []),
            venue_id=self.venue_id.data or None,
            image_url=self.image_url.data or None,
        )


class FeedbackForm(ApiForm):
    """Form for rating a match."""

    comment = StringField(
        "Yorum", filters=[as_text], validators=[DataRequired("Yorum gereklidir")]
    )
    rating = StrictIntegerField(
        "Puan",
        invalid_message=RATING_RANGE,
        validators=[NumberRange(min=MIN_RATING, max=MAX_RATING, message=RATING_RANGE)],
    )


def _canonical(value, allowed, message):
    for option in allowed:
        if str(value).lower() == option.lower():
            return option
    raise ValidationError(message)
