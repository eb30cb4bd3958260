"""Country-appropriate names, addresses, phones and banks (Bangladesh, US, generic)."""

from __future__ import annotations

import random

from faker import Faker

from aml_synth.generation.probabilities import Probabilities
from aml_synth.schemas import Country

BD_MALE_FIRST_NAMES = (
    "Mohammed", "Abdul", "Md", "Sheikh", "Rafiqul", "Kamal", "Jamal", "Hasan", "Hussain",
    "Rahim", "Rashid", "Tariq", "Zaman", "Faruk", "Salam", "Habib", "Nasir", "Kabir",
    "Murad", "Ashraf", "Iqbal", "Monir", "Shahid", "Delwar", "Masud", "Nurul", "Aminul",
    "Shafiq", "Mahfuz", "Anis", "Sumon", "Shakil", "Tanvir", "Parvez", "Zahid", "Kamrul",
    "Mizanur", "Saiful", "Jahangir", "Khaled", "Imran", "Rashed", "Sajjad", "Arif",
    "Mominul", "Tawhid", "Jubayer", "Nayeem", "Fahim", "Mushfiq",
)  # fmt: skip
BD_FEMALE_FIRST_NAMES = (
    "Fatima", "Aisha", "Khadija", "Nasima", "Rahima", "Sultana", "Hasina", "Shamima",
    "Taslima", "Momena", "Rabeya", "Salma", "Nargis", "Jahanara", "Ruksana", "Parveen",
    "Shirin", "Shahnaz", "Rokeya", "Rina", "Lima", "Tania", "Nusrat", "Farzana",
    "Rehana", "Rozina", "Moushumi", "Laila", "Jesmin", "Shapla", "Nahar", "Monira",
    "Amina", "Sadia", "Jannatul", "Shanta", "Ruma", "Sumaya", "Tasnim", "Maliha",
)  # fmt: skip
BD_LAST_NAMES = (
    "Rahman", "Islam", "Hossain", "Ahmed", "Khatun", "Begum", "Akter", "Khan", "Uddin",
    "Ali", "Miah", "Chowdhury", "Siddique", "Hassan", "Karim", "Sheikh", "Talukder",
    "Sarker", "Alam", "Haque", "Bhuiyan", "Sultana", "Mahmud", "Jahan", "Khandaker",
    "Das", "Roy", "Barua", "Mondal", "Bhattacharjee",
)  # fmt: skip

# Bengali script
BD_MALE_FIRST_NAMES_BEN = (
    "মোহাম্মদ", "আব্দুল", "শেখ", "রফিকুল", "কামাল", "জামাল", "হাসান", "হোসাইন",
    "রহিম", "রশিদ", "তারিক", "ফারুক", "সালাম", "হাবিব", "নাসির", "কবির",
    "মুরাদ", "আশরাফ", "ইকবাল", "মনির", "শাহিদ", "দেলোয়ার", "মাসুদ", "নুরুল",
    "আমিনুল", "শফিক", "মাহফুজ", "আনিস", "সুমন", "শাকিল", "তানভীর", "পারভেজ",
    "জাহিদ", "কামরুল", "মিজানুর", "সাইফুল", "জাহাঙ্গীর", "খালেদ", "ইমরান", "রাশেদ",
)  # fmt: skip
BD_FEMALE_FIRST_NAMES_BEN = (
    "ফাতিমা", "আয়েশা", "খাদিজা", "নাসিমা", "রহিমা", "সুলতানা", "হাসিনা", "শামীমা",
    "তাসলিমা", "মোমেনা", "রাবেয়া", "সালমা", "নার্গিস", "জাহানারা", "রুকসানা",
    "পারভীন", "শিরিন", "শাহনাজ", "রোকেয়া", "রিনা", "তানিয়া", "নুসরাত", "ফারজানা",
    "রেহানা", "রোজিনা", "লাইলা", "জেসমিন", "শাপলা", "নাহার", "মনিরা", "আমিনা",
    "সাদিয়া", "জান্নাতুল", "শান্তা", "রুমা", "সুমাইয়া", "তাসনিম", "মালিহা",
)  # fmt: skip
BD_LAST_NAMES_BEN = (
    "রহমান", "ইসলাম", "হোসাইন", "আহমেদ", "খাতুন", "বেগম", "আক্তার", "খান",
    "উদ্দিন", "আলী", "মিয়া", "চৌধুরী", "সিদ্দিকী", "হাসান", "করিম", "শেখ",
    "তালুকদার", "সরকার", "আলম", "হক", "ভুইয়া", "সুলতানা", "মাহমুদ", "জাহান", "খন্দকার",
)  # fmt: skip

BD_CITIES = (
    "Dhaka", "Chittagong", "Rajshahi", "Khulna", "Sylhet", "Rangpur", "Barisal",
    "Comilla", "Gazipur", "Narayanganj", "Mymensingh", "Bogra", "Cox's Bazar",
    "Jessore", "Dinajpur", "Tangail", "Brahmanbaria", "Narsingdi", "Savar", "Tongi",
)  # fmt: skip
BD_CITIES_BEN = (
    "ঢাকা", "চট্টগ্রাম", "রাজশাহী", "খুলনা", "সিলেট", "রংপুর", "বরিশাল",
    "কুমিল্লা", "গাজীপুর", "নারায়ণগঞ্জ", "ময়মনসিংহ", "বগুড়া", "কক্সবাজার",
    "যশোর", "দিনাজপুর", "টাঙ্গাইল", "ব্রাহ্মণবাড়িয়া", "নরসিংদী", "সাভার", "টঙ্গী",
)  # fmt: skip
BD_AREAS = (
    "Dhanmondi", "Gulshan", "Banani", "Uttara", "Mirpur", "Mohammadpur", "Motijheel",
    "Panthapath", "Farmgate", "Kakrail", "Wari", "Lalbagh", "Tejgaon", "Badda",
    "Rampura", "Khilgaon", "Basundhara", "Nikunja", "Baridhara", "Shantinagar",
)  # fmt: skip
BD_AREAS_BEN = (
    "ধানমন্ডি", "গুলশান", "বনানী", "উত্তরা", "মিরপুর", "মোহাম্মদপুর", "মতিঝিল",
    "পান্থপথ", "ফার্মগেট", "কাকরাইল", "ওয়ারী", "লালবাগ", "তেজগাঁও", "বাড্ডা",
    "রামপুরা", "খিলগাঁও", "বসুন্ধরা", "নিকুঞ্জ", "বারিধারা", "শান্তিনগর",
)  # fmt: skip

BD_BANK_NAMES = (
    "Sonali Bank", "Janata Bank", "Agrani Bank", "Rupali Bank", "Bangladesh Krishi Bank",
    "Pubali Bank", "Uttara Bank", "National Bank", "The City Bank", "IFIC Bank",
    "United Commercial Bank", "Eastern Bank", "BRAC Bank", "Dutch-Bangla Bank",
    "Prime Bank", "Southeast Bank", "Dhaka Bank", "Islami Bank Bangladesh",
    "AB Bank", "NCC Bank", "One Bank", "Bank Asia", "Trust Bank",
    "Shahjalal Islami Bank", "Exim Bank", "Jamuna Bank", "Standard Bank",
    "Mercantile Bank", "Mutual Trust Bank", "First Security Islami Bank",
)  # fmt: skip
US_BANK_NAMES = (
    "JPMorgan Chase", "Bank of America", "Wells Fargo", "Citibank", "U.S. Bancorp",
    "Truist Financial", "TD Bank", "PNC Financial", "Capital One", "Goldman Sachs",
    "Morgan Stanley", "Fifth Third Bank", "Citizens Bank", "KeyBank", "Regions Bank",
    "M&T Bank", "Huntington Bank", "Ally Financial", "Synchrony Financial", "Discover Financial",
)  # fmt: skip

BD_MOBILE_PREFIXES = ("013", "014", "015", "016", "017", "018", "019")

COUNTRY_NAMES: dict[str, str] = {"BD": "Bangladesh", "US": "United States"}


def is_bengali_field(field_name: str | None) -> bool:
    """Fields named like `customerNameBen` / `addressBen` carry Bengali script."""
    return bool(field_name) and field_name.lower().endswith("ben")  # type: ignore[union-attr]


def country_from_nationality(nationality: str | None) -> Country:
    return "BD" if nationality == COUNTRY_NAMES["BD"] else "US"


class LocaleProvider:
    """Locale-dependent values. `country` None means generic Faker output."""

    def __init__(
        self,
        rng: random.Random,
        faker: Faker,
        probabilities: Probabilities | None = None,
    ) -> None:
        self._rng = rng
        self._faker = faker
        self._probabilities = probabilities or Probabilities()

    def _is_male(self) -> bool:
        return self._probabilities.gender.draw(self._rng) == "male"

    def bd_full_name(self, bengali: bool = False) -> str:
        male = self._is_male()
        if bengali:
            first = self._rng.choice(BD_MALE_FIRST_NAMES_BEN if male else BD_FEMALE_FIRST_NAMES_BEN)
            return f"{first} {self._rng.choice(BD_LAST_NAMES_BEN)}"
        first = self._rng.choice(BD_MALE_FIRST_NAMES if male else BD_FEMALE_FIRST_NAMES)
        return f"{first} {self._rng.choice(BD_LAST_NAMES)}"

    def bd_address(self, bengali: bool = False) -> str:
        house = self._rng.randint(1, 200)
        road = self._rng.randint(1, 50)
        postal = self._rng.randint(1000, 9999)
        if bengali:
            area = self._rng.choice(BD_AREAS_BEN)
            city = self._rng.choice(BD_CITIES_BEN)
            return f"বাড়ি #{house}, রাস্তা #{road}, {area}, {city} {postal}"
        area = self._rng.choice(BD_AREAS)
        city = self._rng.choice(BD_CITIES)
        return f"House #{house}, Road #{road}, {area}, {city} {postal}"

    def bd_phone(self) -> str:
        prefix = self._rng.choice(BD_MOBILE_PREFIXES)
        digits = "".join(self._rng.choices("0123456789", k=8))
        return f"+880{prefix}{digits}"

    def full_name(self, country: Country | None, field_name: str | None = None) -> str:
        if country == "BD":
            return self.bd_full_name(bengali=is_bengali_field(field_name))
        return self._faker.name()

    def first_name(self, country: Country | None) -> str:
        if country == "BD":
            return self._rng.choice(
                BD_MALE_FIRST_NAMES if self._is_male() else BD_FEMALE_FIRST_NAMES
            )
        return self._faker.first_name()

    def last_name(self, country: Country | None) -> str:
        if country == "BD":
            return self._rng.choice(BD_LAST_NAMES)
        return self._faker.last_name()

    def address(self, country: Country | None, field_name: str | None = None) -> str:
        if country == "BD":
            return self.bd_address(bengali=is_bengali_field(field_name))
        return self._faker.street_address()

    def city(self, country: Country | None) -> str:
        if country == "BD":
            return self._rng.choice(BD_CITIES)
        return self._faker.city()

    def country_name(self, country: Country | None) -> str:
        if country in COUNTRY_NAMES:
            return COUNTRY_NAMES[country]  # type: ignore[index]
        return self._faker.country()

    def country_code(self, country: Country | None) -> str:
        if country in COUNTRY_NAMES:
            return country  # type: ignore[return-value]
        return self._faker.country_code()

    def phone(self, country: Country | None) -> str:
        if country == "BD":
            return self.bd_phone()
        return self._faker.phone_number()

    def bank_name(self, country: Country | None) -> str:
        if country == "BD":
            return self._rng.choice(BD_BANK_NAMES)
        if country == "US":
            return self._rng.choice(US_BANK_NAMES)
        return self._rng.choice(BD_BANK_NAMES + US_BANK_NAMES)
