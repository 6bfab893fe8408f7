"""Locale entity and the catalogue of locales a project may enable."""

from typing import NamedTuple

from glossa.domain.project.model.value import LocaleCode, LocaleId, ProjectId
from glossa.domain.shared.authorization.resource import LocaleResource
from glossa.domain.shared.model.entity import Entity


class LocaleInfo(NamedTuple):
    language: str
    region: str


SUPPORTED_LOCALES: dict[LocaleCode, LocaleInfo] = {
    "en_US": LocaleInfo("English", "United States"),
    "en_GB": LocaleInfo("English", "United Kingdom"),
    "en_CA": LocaleInfo("English", "Canada"),
    "en_AU": LocaleInfo("English", "Australia"),
    "es_ES": LocaleInfo("Spanish", "Spain"),
    "es_MX": LocaleInfo("Spanish", "Mexico"),
    "es_AR": LocaleInfo("Spanish", "Argentina"),
    "fr_FR": LocaleInfo("French", "France"),
    "fr_CA": LocaleInfo("French", "Canada"),
    "fr_BE": LocaleInfo("French", "Belgium"),
    "fr_CH": LocaleInfo("French", "Switzerland"),
    "de_DE": LocaleInfo("German", "Germany"),
    "de_AT": LocaleInfo("German", "Austria"),
    "de_CH": LocaleInfo("German", "Switzerland"),
    "it_IT": LocaleInfo("Italian", "Italy"),
    "pt_PT": LocaleInfo("Portuguese", "Portugal"),
    "pt_BR": LocaleInfo("Portuguese", "Brazil"),
    "nl_NL": LocaleInfo("Dutch", "Netherlands"),
    "nl_BE": LocaleInfo("Dutch", "Belgium"),
    "pl_PL": LocaleInfo("Polish", "Poland"),
    "ru_RU": LocaleInfo("Russian", "Russia"),
    "ja_JP": LocaleInfo("Japanese", "Japan"),
    "zh_CN": LocaleInfo("Chinese", "China"),
    "zh_TW": LocaleInfo("Chinese", "Taiwan"),
    "zh_HK": LocaleInfo("Chinese", "Hong Kong"),
    "ko_KR": LocaleInfo("Korean", "South Korea"),
    "ar_SA": LocaleInfo("Arabic", "Saudi Arabia"),
    "ar_EG": LocaleInfo("Arabic", "Egypt"),
    "hi_IN": LocaleInfo("Hindi", "India"),
    "tr_TR": LocaleInfo("Turkish", "Turkey"),
    "sv_SE": LocaleInfo("Swedish", "Sweden"),
    "no_NO": LocaleInfo("Norwegian", "Norway"),
    "da_DK": LocaleInfo("Danish", "Denmark"),
    "fi_FI": LocaleInfo("Finnish", "Finland"),
    "el_GR": LocaleInfo("Greek", "Greece"),
    "cs_CZ": LocaleInfo("Czech", "Czech Republic"),
    "hu_HU": LocaleInfo("Hungarian", "Hungary"),
    "ro_RO": LocaleInfo("Romanian", "Romania"),
    "th_TH": LocaleInfo("Thai", "Thailand"),
    "vi_VN": LocaleInfo("Vietnamese", "Vietnam"),
    "id_ID": LocaleInfo("Indonesian", "Indonesia"),
    "ms_MY": LocaleInfo("Malay", "Malaysia"),
    "uk_UA": LocaleInfo("Ukrainian", "Ukraine"),
    "he_IL": LocaleInfo("Hebrew", "Israel"),
}


class Locale(Entity):
    """Invariant: `(project_id, code)` is unique."""

    id: LocaleId
    project_id: ProjectId
    code: LocaleCode
    language: str | None = None
    region: str | None = None

    def snapshot(self) -> LocaleResource:
        return LocaleResource(code=self.code, project_id=self.project_id)

    @classmethod
    def create(cls, project_id: ProjectId, code: LocaleCode, info: LocaleInfo) -> "Locale":
        return cls(
            id=LocaleId.generate(),
            project_id=project_id,
            code=code,
            language=info.language,
            region=info.region,
        )
