from contract_templates.common import SIGNATURE_FOOTER

PRODUCER_BODY = """# PRODUCER AGREEMENT

**AGREEMENT** made and entered into as of this **${date}** between **${artist}** ("Company", "we" or "us") and **${producerCompany}** ("Lender" or "you") f/s/o **${producer}** ("Producer"), in connection with Producer's services on the recording project described below for release through ${recordCompany} ("Record Company").

---

## 1. PARTIES

**Company:** ${artist}, ${company}

${companyAddress}

**Contact:** ${companyContact} | **Email:** ${companyEmail} | **Phone:** ${companyPhone}

**Lender / Producer:** ${producerCompany} f/s/o ${producer}

${producerAddress}

**Contact:** ${producerContact} | **Email:** ${producerEmail} | **Phone:** ${producerPhone}

## 2. MASTERS

**2.1 Engagement.** Company hereby engages Lender to furnish the services of Producer, and Lender shall cause Producer to produce ${numberOfMasters} master recording(s) (the "Masters") embodying the musical composition entitled **"${compositionTitle}"** (the "Composition"), in collaboration with ${coProducer} (the "Co-Producer").

**2.2 Project.** ${projectDescription}

**2.3 Standard.** The Masters shall be commercially and technically satisfactory to Company and Record Company for the manufacture and sale of records, and shall be delivered together with all session files, stems and credit information customarily delivered in the recording industry.

## 3. ADVANCE AND ROYALTY

**3.1 Advance.** Company shall pay or cause Record Company to pay Lender an advance of **${advance}** (the "Advance"), which shall be fully recoupable from Producer's Royalty and payable promptly following the later of full execution of this Agreement and delivery of the Masters.

**3.2 Royalty.** Company shall pay or cause Record Company to pay Lender a royalty of **${royaltyRate}** (the "Base Rate") of the royalty base price on net sales of records embodying the Masters, computed, reduced and pro-rated on the same basis as the artist royalty under Company's recording agreement ("Producer's Royalty").

**3.3 Recoupment.** Producer's Royalty shall be payable retroactive to "record one" after recoupment of the recording costs of the Masters at the net artist rate, excluding the Advance.

## 4. GRANT OF RIGHTS

**4.1 Works for Hire.** All results and proceeds of Producer's services, excluding the Composition, shall be works made for hire for Company, and to the extent they are not, Lender hereby assigns all right, title and interest therein to Company throughout ${territory} in perpetuity.

**4.2 Name and Likeness.** Company and its licensees may use Producer's approved name, likeness and biographical material solely in connection with the Masters and records embodying them.

**4.3 Credit.** Company shall accord Producer credit substantially in the form "Produced by ${producer}" on all records and metadata embodying the Masters where production credits customarily appear.

## 5. CONTROLLED COMPOSITIONS

To the extent Producer writes, owns or controls any portion of the Composition, Lender grants Company and its designees a mechanical license at the rates and on the terms set forth in Company's recording agreement, and shall cause any publishing designee to do the same.

## 6. ACCOUNTING AND AUDIT

**6.1 Statements.** Company shall render statements to Lender semi-annually, together with payment of any royalties shown to be due, within ninety (90) days after the close of each accounting period.

**6.2 Objections.** Each statement shall be binding on Lender unless specific written objection is given within **${objectionPeriodMonths}** months after the statement is rendered, and no suit shall be brought more than **${lawsuitPeriodMonths}** months after such objection.

**6.3 Audit.** Lender may audit Company's books relating to the Masters once per year, upon thirty (30) days written notice, with respect to statements rendered within the preceding **${auditWindowMonths}** months.

## 7. REPRESENTATIONS AND WARRANTIES

Lender represents and warrants that (i) it has the right to enter into this Agreement and to furnish Producer's services; (ii) no material furnished by Lender or Producer will infringe the rights of any person; (iii) Producer shall not re-record the Composition for any other person for three (3) years after delivery; and (iv) Lender shall be solely responsible for any taxes arising from payments hereunder.

## 8. INDEMNITY

Each party shall indemnify the other against any third party claim arising from a breach of its representations, warranties or covenants herein, to the extent reduced to final judgment or settled with the indemnifying party's consent.

## 9. NOTICES

All notices shall be in writing and sent to the addresses set forth in paragraph 1, with copies to Company's counsel, Attention: ${ourCounselAttention}, and to Lender's counsel, ${yourCounselFirm}, c/o ${yourCounselCO}, Attention: ${yourCounselAttention}.

## 10. GOVERNING LAW

This Agreement shall be governed by and construed in accordance with the laws of the State of ${governingLaw}. Any action arising hereunder shall be brought solely in the courts located in that State.

## 11. MISCELLANEOUS

**11.1 Cure.** Neither party shall be in breach of this Agreement unless it fails to cure within thirty (30) days after written notice of the alleged breach.

**11.2 Assignment.** Company may assign this Agreement to Record Company or any affiliate. Lender may assign only its right to receive payment.

**11.3 Entire Agreement.** This Agreement is the entire understanding of the parties and may be amended only in a signed writing. It may be executed in counterparts, including by electronic signature.

**AGREED AND ACCEPTED:**

By: ${signature1Name}

Title: ${signature1Title}

By: ${signature2Name}

Title: ${signature2Title}

Lender Federal Tax ID: ${federalTaxId}

## INDUCEMENT

To induce ${inducementLenderName} to enter into the foregoing Agreement with ${inducementProductionsName}, the undersigned, collectively p/k/a **${collectivePkaName}**, hereby acknowledges familiarity with the Agreement, assents to its execution, agrees to be bound by its terms as they relate to the undersigned, and guarantees the full performance of the Agreement by Lender.

""" + SIGNATURE_FOOTER

EXHIBIT_A_LOD = """## EXHIBIT A

**Letter of Direction**

${lodAddresseeName}

c/o ${lodAddresseeCo}

${lodAddresseeAddress}

Re: ${lodYouName} / ${lodProductionsName}, "${compositionTitle}"

Dated as of: ${date}

Ladies and Gentlemen:

This will confirm that ${lodProductionsName} has been engaged to furnish the services of ${producer} in connection with the master recording(s) of "${compositionTitle}".

1. You are hereby irrevocably authorized and directed to account for and pay directly to ${lodProductionsName} all royalties and advances payable in connection with such master recording(s), at the royalty rate of ${royaltyRate}.
2. Payments shall be sent to ${lodYouName}, ${lodYouAddress1}, ${lodYouAddress2}.
3. This authorization is irrevocable and is for our convenience only; all such payments shall constitute payments to us.

Very truly yours,

${artist}

By: _____________________ (An Authorized Signatory)"""

EXHIBIT_B_COMPOSER = """## EXHIBIT B

**Composer / Writer Agreement**

**Party:** ${composerPartyName}

${composerAddress1}

${composerAddress2}

${composerAddress3}

**Attention:** ${composerAttention}

The undersigned, as writer and publisher (or publishing designee) of its share of the composition entitled "${compositionTitle}", hereby grants to ${artist} and its licensees a mechanical license to reproduce such share on records embodying the master recording(s) produced under the foregoing Agreement, on the controlled composition terms set forth therein, and agrees that its ownership share and credit shall be as agreed among the writers in writing.

**AGREED AND ACCEPTED:**

By: ${composerSignerName}

Title: ${composerSignerTitle}"""
