"""Template catalog: the fixed set of contract templates and their fields.

Each template pairs an ordered field schema (name, label, form section,
required flag, default, kind) with a body of legal prose holding
``${name}`` placeholders, plus optional schedules/exhibits. Prose lives in
the ``contract_templates`` package; this module only wires it up.

Lookups by unknown identifier raise ``UnknownTemplateError`` listing the
valid identifiers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from contract_templates import form_producer_agreement as fpa
from contract_templates import management_agreement as mgmt
from contract_templates import producer_agreement as prod
from contract_templates.common import SIGNATURE_LINE

TEXT = "text"
PERCENT = "percent"
EMAIL = "email"
DATE = "date"
FLAG = "flag"


class TemplateKey(str, Enum):
    PRODUCER_AGREEMENT = "producer-agreement"
    MANAGEMENT_AGREEMENT = "management-agreement"
    FORM_PRODUCER_AGREEMENT = "form-producer-agreement"


class UnknownTemplateError(KeyError):
    """Raised when a template identifier is not in the catalog."""

    def __init__(self, template_id: object):
        self.template_id = template_id
        valid = ", ".join(k.value for k in TemplateKey)
        super().__init__(f"Unknown template '{template_id}'. Valid templates: {valid}")

    def __str__(self) -> str:
        return str(self.args[0])


@dataclass(frozen=True)
class FieldDef:
    name: str
    label: str
    section: str = "General"
    required: bool = False
    default: Optional[str] = None
    kind: str = TEXT


@dataclass(frozen=True)
class Attachment:
    """A schedule or exhibit appended after the template body.

    ``include_when`` names a flag field; when set, the attachment is only
    included if that flag resolves to ``yes``.
    """

    key: str
    title: str
    body: str
    include_when: Optional[str] = None


@dataclass(frozen=True)
class Template:
    key: TemplateKey
    name: str
    fields: Tuple[FieldDef, ...]
    body: str
    attachments: Tuple[Attachment, ...] = ()

    @property
    def variables(self) -> List[str]:
        return [f.name for f in self.fields]

    @property
    def defaults(self) -> Dict[str, str]:
        return {f.name: f.default for f in self.fields if f.default is not None}

    def field(self, name: str) -> Optional[FieldDef]:
        for f in self.fields:
            if f.name == name:
                return f
        return None


COMMON_FIELDS: Tuple[FieldDef, ...] = (
    FieldDef("date", "Agreement Date", "General", required=True, kind=DATE),
    FieldDef("artist", "Artist/Company Name", "Parties", required=True),
    FieldDef("company", "Company (if different)", "Parties"),
    FieldDef("companyAddress", "Company Address", "Parties"),
    FieldDef("companyContact", "Company Contact", "Parties"),
    FieldDef("companyTitle", "Company Signer Title", "Parties", default=SIGNATURE_LINE),
    FieldDef("companyEmail", "Company Email", "Parties", kind=EMAIL),
    FieldDef("companyPhone", "Company Phone", "Parties"),
    FieldDef("producer", "Producer Name", "Parties", required=True),
    FieldDef("producerCompany", "Producer Company (Loan-out)", "Parties"),
    FieldDef("producerAddress", "Producer Address", "Parties"),
    FieldDef("producerContact", "Producer Contact", "Parties"),
    FieldDef("producerTitle", "Producer Signer Title", "Parties", default=SIGNATURE_LINE),
    FieldDef("producerEmail", "Producer Email", "Parties", kind=EMAIL),
    FieldDef("producerPhone", "Producer Phone", "Parties"),
)

PRODUCER_FIELDS: Tuple[FieldDef, ...] = (
    FieldDef("recordCompany", "Record Company", "Deal Terms"),
    FieldDef("compositionTitle", "Composition Title", "Masters", required=True),
    FieldDef("numberOfMasters", "Number of Masters", "Masters", default="1"),
    FieldDef("coProducer", "Co-Producer", "Masters"),
    FieldDef("projectDescription", "Project Description", "Masters"),
    FieldDef("advance", "Advance (currency)", "Financial", required=True, default="$25,000"),
    FieldDef("royaltyRate", "Producer Royalty Rate (%)", "Financial", required=True, default="3%", kind=PERCENT),
    FieldDef("territory", "Territory", "Legal", default="the universe"),
    FieldDef("governingLaw", "Governing Law", "Legal", default="California"),
    # Notices / counsel
    FieldDef("ourCounselAttention", "Our Counsel Attention", "Notices"),
    FieldDef("yourCounselFirm", "Your Counsel Firm", "Notices"),
    FieldDef("yourCounselCO", "Your Counsel c/o", "Notices"),
    FieldDef("yourCounselAttention", "Your Counsel Attention", "Notices"),
    # Periods
    FieldDef("objectionPeriodMonths", "Objection Period (months)", "Accounting", default="36"),
    FieldDef("lawsuitPeriodMonths", "Lawsuit Period (months)", "Accounting", default="6"),
    FieldDef("auditWindowMonths", "Audit Window (months)", "Accounting", default="36"),
    # Inducement & signatures
    FieldDef("inducementLenderName", "Inducement Lender Name", "Inducement"),
    FieldDef("inducementProductionsName", "Inducement Productions Name", "Inducement"),
    FieldDef("collectivePkaName", "Collectively p/k/a Name", "Inducement"),
    FieldDef("signature1Name", "Signature Block 1 - Name", "Signatures"),
    FieldDef("signature1Title", "Signature Block 1 - Title", "Signatures"),
    FieldDef("signature2Name", "Signature Block 2 - Name", "Signatures"),
    FieldDef("signature2Title", "Signature Block 2 - Title", "Signatures"),
    FieldDef("federalTaxId", "Federal Tax ID", "Signatures"),
    # Exhibit A LoD
    FieldDef("includeLetterOfDirection", "Include Exhibit A (Letter of Direction)", "Attachments", default="yes", kind=FLAG),
    FieldDef("lodAddresseeName", "LoD Addressee Name", "Exhibit A - LoD"),
    FieldDef("lodAddresseeCo", "LoD Addressee c/o", "Exhibit A - LoD"),
    FieldDef("lodAddresseeAddress", "LoD Addressee Address", "Exhibit A - LoD"),
    FieldDef("lodYouName", 'LoD "You" Name', "Exhibit A - LoD"),
    FieldDef("lodYouAddress1", 'LoD "You" Address 1', "Exhibit A - LoD"),
    FieldDef("lodYouAddress2", 'LoD "You" Address 2', "Exhibit A - LoD"),
    FieldDef("lodProductionsName", "LoD Productions Name", "Exhibit A - LoD"),
    # Exhibit B Composer
    FieldDef("includeComposerExhibit", "Include Exhibit B (Composer)", "Attachments", default="yes", kind=FLAG),
    FieldDef("composerPartyName", "Composer/Writer Party Name", "Exhibit B - Composer"),
    FieldDef("composerAddress1", "Composer Address 1", "Exhibit B - Composer"),
    FieldDef("composerAddress2", "Composer Address 2", "Exhibit B - Composer"),
    FieldDef("composerAddress3", "Composer Address 3", "Exhibit B - Composer"),
    FieldDef("composerAttention", "Composer Attention", "Exhibit B - Composer"),
    FieldDef("composerSignerName", "Composer Signer Name", "Exhibit B - Composer"),
    FieldDef("composerSignerTitle", "Composer Signer Title", "Exhibit B - Composer"),
)

MGMT_FIELDS: Tuple[FieldDef, ...] = (
    FieldDef("commissionRate", "Commission Rate (%)", "Financial", required=True, default="20%", kind=PERCENT),
    FieldDef("termYears", "Term (years)", "Term", required=True, default="4"),
    FieldDef("artistAddress", "Artist Address", "Parties"),
    FieldDef("artistContact", "Artist Contact", "Parties"),
    FieldDef("artistEmail", "Artist Email", "Parties", kind=EMAIL),
    FieldDef("artistPhone", "Artist Phone", "Parties"),
)

FORM_PRODUCER_FIELDS: Tuple[FieldDef, ...] = (
    FieldDef("professionalArtistName", "Professional Artist Name", "Parties"),
    FieldDef("distributionAgreementDate", "Distribution Agreement Date", "General"),
    FieldDef("lenderAddress", "Lender Address", "Parties"),
    FieldDef("lenderContact", "Lender Contact", "Parties"),
    FieldDef("lenderEmail", "Lender Email", "Parties", kind=EMAIL),
    FieldDef("lenderPhone", "Lender Phone", "Parties"),
    FieldDef("compositionTitle", "Composition Title", "Masters", required=True),
    FieldDef("numberOfMasters", "Number of Masters", "Masters", default="1"),
    FieldDef("advance", "Advance (currency)", "Financial", required=True, default="$25,000"),
    FieldDef("royaltyRate", "Producer Royalty Rate (%)", "Financial", required=True, default="3%", kind=PERCENT),
    # Schedule 1 (writers & credits)
    FieldDef("writersAndSplits", "Writers and Splits", "Schedule 1"),
    # Signature blocks
    FieldDef("companySignTitle", "Company Signer Title", "Signatures"),
    FieldDef("companySignName", "Company Signer Printed Name", "Signatures"),
    FieldDef("lenderSignTitle", "Lender Signer Title", "Signatures"),
    FieldDef("lenderSignName", "Lender Signer Printed Name", "Signatures"),
    # SoundExchange / LOD
    FieldDef("includeSoundExchangeLod", "Include Exhibit C (SoundExchange LOD)", "Attachments", default="yes", kind=FLAG),
    FieldDef("payeeId", "Payee ID", "SoundExchange"),
    FieldDef("payeeAddress", "Payee Address", "SoundExchange"),
    FieldDef("payeePhone", "Payee Phone", "SoundExchange"),
    FieldDef("payeeEmail", "Payee Email", "SoundExchange", kind=EMAIL),
    FieldDef("lodPaymentPercentage", "LOD Payment Percentage (%)", "SoundExchange", kind=PERCENT),
    FieldDef("lodTrackName", "LOD Track Name", "SoundExchange"),
    FieldDef("lodEffectiveDate", "LOD Effective Date", "SoundExchange", default="Retro"),
    FieldDef("lodTrackVersion", "LOD Track Version", "SoundExchange", default="Studio"),
    FieldDef("lodIsrc", "LOD ISRC", "SoundExchange"),
    FieldDef("lodAlbum", "LOD Album", "SoundExchange"),
    FieldDef("lodLabel", "LOD Label", "SoundExchange"),
    FieldDef("lodReleaseDate", "LOD Release Date", "SoundExchange"),
    FieldDef("lodOtherArtists", "LOD Other Artists", "SoundExchange", default="None"),
    # Performer/Signatures SoundExchange
    FieldDef("performerSignature", "Performer Signature", "SoundExchange Signatures"),
    FieldDef("performerPrintedName", "Performer Printed Legal Name", "SoundExchange Signatures"),
    FieldDef("authorizedSignatory", "Authorized LOD Signatory", "SoundExchange Signatures"),
    FieldDef("authorizedSignatoryPrintedName", "Authorized LOD Signatory Printed Name", "SoundExchange Signatures"),
    FieldDef("signatureDate", "Date of Signature", "SoundExchange Signatures"),
    FieldDef("additionalPerformerSignature", "Additional Performer Signature", "SoundExchange Signatures"),
    FieldDef("additionalPerformerPrintedName", "Additional Performer Printed Legal Name", "SoundExchange Signatures"),
    FieldDef("additionalAuthorizedSignatory", "Additional Authorized LOD Signatory", "SoundExchange Signatures"),
    FieldDef("additionalAuthorizedSignatoryPrintedName", "Additional Authorized LOD Signatory Printed Name", "SoundExchange Signatures"),
    FieldDef("additionalSignatureDate", "Additional Date of Signature", "SoundExchange Signatures"),
)


TEMPLATES: Dict[TemplateKey, Template] = {
    TemplateKey.PRODUCER_AGREEMENT: Template(
        key=TemplateKey.PRODUCER_AGREEMENT,
        name="Producer Agreement",
        fields=COMMON_FIELDS + PRODUCER_FIELDS,
        body=prod.PRODUCER_BODY,
        attachments=(
            Attachment("exhibit-a", "Exhibit A - Letter of Direction", prod.EXHIBIT_A_LOD, "includeLetterOfDirection"),
            Attachment("exhibit-b", "Exhibit B - Composer Agreement", prod.EXHIBIT_B_COMPOSER, "includeComposerExhibit"),
        ),
    ),
    TemplateKey.MANAGEMENT_AGREEMENT: Template(
        key=TemplateKey.MANAGEMENT_AGREEMENT,
        name="Personal Management Agreement",
        fields=COMMON_FIELDS + MGMT_FIELDS,
        body=mgmt.MANAGEMENT_BODY,
    ),
    TemplateKey.FORM_PRODUCER_AGREEMENT: Template(
        key=TemplateKey.FORM_PRODUCER_AGREEMENT,
        name="Form Producer Agreement",
        fields=COMMON_FIELDS + FORM_PRODUCER_FIELDS,
        body=fpa.FORM_PRODUCER_BODY,
        attachments=(
            Attachment("schedule-1", "Schedule 1 - Masters, Compositions and Credits", fpa.SCHEDULE_1),
            Attachment("schedule-2", "Schedule 2 - Producer Royalty Provisions", fpa.SCHEDULE_2),
            Attachment("exhibit-a", "Exhibit A - Recording Agreement Extracts", fpa.EXHIBIT_A),
            Attachment("exhibit-b", "Exhibit B - Letter of Direction", fpa.EXHIBIT_B),
            Attachment("exhibit-c", "Exhibit C - SoundExchange Letter of Direction", fpa.EXHIBIT_C, "includeSoundExchangeLod"),
        ),
    ),
}


def get_template(template_id: Union[str, TemplateKey, Template]) -> Template:
    """Return the template for an identifier, or raise UnknownTemplateError."""
    if isinstance(template_id, Template):
        return template_id
    try:
        key = TemplateKey(template_id)
    except ValueError:
        raise UnknownTemplateError(template_id) from None
    return TEMPLATES[key]


def list_templates() -> List[Template]:
    return [TEMPLATES[k] for k in TemplateKey]
