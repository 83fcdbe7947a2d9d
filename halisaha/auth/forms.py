"""Forms for the auth blueprint."""

from wtforms import (
    PasswordField,
    SelectField,
    StringField,
    ValidationError,
)
from wtforms.validators import DataRequired, Length, NumberRange, Optional

from halisaha.constants import POSITIONS
from halisaha.forms import ApiForm, StrictIntegerField, as_str, as_text


class RegisterForm(ApiForm):
    """Registration form."""

    username = StringField(
        "Kullanıcı Adı",
        filters=[as_text],
        validators=[
            DataRequired("Kullanıcı adı gereklidir"),
            Length(min=3, message="Kullanıcı adı en az 3 karakter olmalıdır"),
        ],
    )
    password = PasswordField(
        "Şifre",
        filters=[as_str],
        validators=[
            DataRequired("Şifre gereklidir"),
            Length(min=6, message="Şifre en az 6 karakter olmalıdır"),
        ],
    )
    full_name = StringField(
        "Ad Soyad",
        name="fullName",
        filters=[as_text],
        validators=[
            DataRequired("Ad soyad gereklidir"),
            Length(min=2, message="Ad soyad gereklidir"),
        ],
    )
    phone = StringField(
        "Telefon",
        filters=[as_text],
        validators=[
            DataRequired("Geçerli bir telefon numarası giriniz"),
            Length(min=10, message="Geçerli bir telefon numarası giriniz"),
        ],
    )
    position = SelectField(
        "Mevki",
        choices=[(p, p) for p in POSITIONS],
        validate_choice=False,
        validators=[DataRequired("Mevki seçiniz")],
    )
    height = StrictIntegerField(
        "Boy",
        invalid_message="Geçersiz boy",
        validators=[Optional(), NumberRange(min=0, message="Geçersiz boy")],
    )
    weight = StrictIntegerField(
        "Kilo",
        invalid_message="Geçersiz kilo",
        validators=[Optional(), NumberRange(min=0, message="Geçersiz kilo")],
    )
    age = StrictIntegerField(
        "Yaş",
        invalid_message="Geçersiz yaş",
        validators=[Optional(), NumberRange(min=0, message="Geçersiz yaş")],
    )
    profile_picture = StringField(
        "Profil Fotoğrafı",
        name="profilePicture",
        filters=[as_text],
        validators=[Optional()],
    )

    def validate_position(self, field):
        """Accept any known position, case-insensitively."""
        for position in POSITIONS:
            if field.data.lower() == position.lower():
                field.data = position
                return
        raise ValidationError("Mevki seçiniz")

    def to_fields(self, hashed_password):
        """Return the user fields with the credential replaced by its hash."""
        return {
            "username": self.username.data,
            "password": hashed_password,
            "fullName": self.full_name.data,
            "phone": self.phone.data,
            "position": self.position.data,
            "height": self.height.data,
            "weight": self.weight.data,
            "age": self.age.data,
            "profilePicture": self.profile_picture.data or None,
        }


class LoginForm(ApiForm):
    """Login form."""

    username = StringField(
        "Kullanıcı Adı",
        filters=[as_text],
        validators=[DataRequired("Kullanıcı adı gereklidir")],
    )
    password = PasswordField(
        "Şifre", filters=[as_str], validators=[DataRequired("Şifre gereklidir")]
    )
