FORM_PRODUCER_BODY = """# PRODUCER AGREEMENT

This agreement ("Agreement") dated as of ${date} sets forth the material terms of the agreement between ${artist} ("Company", "we" or "us") and ${producerCompany} ("Lender" or "you") f/s/o ${producer} ("Producer") for Producer's non-exclusive co-production services in connection with the master recording(s) set forth below featuring the recorded performance(s) of the artist professionally known as ${professionalArtistName} ("Artist"), subject to Artist's exclusive recording agreement with Republic Records, a division of UMG Recordings, Inc. ("Distributor"), dated as of ${distributionAgreementDate}, as amended ("Recording Agreement"). Capitalized terms used herein and not specifically defined herein shall have the meanings ascribed to them in the Recording Agreement. Lender and Company agree to the following:

## 1. ARTIST

${artist}

## 2. PRODUCER

${producer}

## 3. COMPANY

${companyAddress}

Contact: ${companyContact}

Email: ${companyEmail}

Phone: ${companyPhone}

## 4. LENDER

${lenderAddress}

Contact: ${lenderContact}

Email: ${lenderEmail}

Phone: ${lenderPhone}

## 5. COMPOSITION(S) / MASTER(S)

${numberOfMasters} master recording(s) ("Master(s)") embodying Artist's featured performance of the musical composition(s) listed on Schedule 1 (the "Composition(s)") attached hereto and made a part hereof.

## 6. SERVICES

Lender shall cause Producer to perform all production services in connection with the Master(s) as are customarily performed by producers in the recording industry. The Master(s) shall be commercially and technically satisfactory to both Company and Distributor for the manufacture and sale of records.

## 7. ADVANCE / FEE / ROYALTY

**Fee / Advance.** Company shall pay or shall cause Distributor to pay Lender an advance in the amount of ${advance} (the "Advance"), which shall be a fully recoupable advance against Producer's Royalty. The Advance will be paid promptly following the later of the complete execution of this Agreement and Lender's satisfactory delivery of the Master(s).

**Royalty.** Company shall pay or shall cause Distributor to pay to Lender a royalty of ${royaltyRate} (the "Base Rate") PPD as defined in the Producer Royalty Provisions attached as Schedule 2, pursuant to the irrevocable letter of direction annexed hereto as Exhibit B, on top-line USNRC Net Sales of Records ("Producer's Royalty"). Producer's Royalty shall be calculated, adjusted and pro-rated on the same basis as Distributor calculates Artist's royalties under the Recording Agreement, subject to the Recording Agreement Extracts attached as Exhibit A.

## 8. CONTROLLED COMPOSITION

The Composition(s) shall be owned and controlled in accordance with the ownership interests set forth on Schedule 1. To the extent any composition written, owned or controlled by Lender, Producer or Producer Personnel is embodied in the Master(s), Lender and Producer grant to Company, Artist, Distributor and their designees ("Company's Designees") an irrevocable, universe-wide license to reproduce their share of such composition on the Master(s) pursuant to the controlled composition clause of the Recording Agreement, excluding any reductions in the statutory rate or mechanical "caps".

## 9. OWNERSHIP OF MASTER(S) / GRANT OF RIGHTS

All results and proceeds of the services of Lender, Producer and any third party furnished by Lender or Producer ("Producer Personnel"), excluding the Composition(s), shall be deemed "works-for-hire" for Company within the meaning of the Copyright Act of 1976, as amended. If the Master(s) do not so qualify, all such rights are hereby assigned to Company. Company and Distributor shall have the exclusive right to exploit the Master(s) in all media throughout the universe in perpetuity, and the right to use Producer's approved name, likeness and biographical material solely in connection with the Master(s).

## 10. CREDIT

Company shall accord, or shall use reasonable commercial efforts to cause Distributor to accord, credit to Producer as set forth on Schedule 1 in the liner notes and metadata of any record containing the Master(s). No inadvertent failure to provide such credit shall be a breach of this Agreement, provided Company uses reasonable efforts to cure such failure prospectively following written notice from Lender.

## 11. SAMPLES

Lender and Producer will not sample, interpolate or otherwise incorporate into the Master(s) any copyrighted material belonging to any person ("Proprietary Material") unless approved by Company in writing. Clearance costs for samples approved in advance shall be recoupable Recording Costs; sums payable in connection with undisclosed samples furnished by Lender or Producer shall be deductible from any sums due to Lender hereunder.

## 12. REPRESENTATIONS / WARRANTIES

Each party warrants that it has the right to enter into this Agreement and grant the rights granted hereunder. Lender further warrants that (i) Producer shall not re-record the Composition(s) for any other person for three (3) years from delivery; (ii) no material furnished by Lender, Producer or Producer Personnel will infringe the rights of any person; and (iii) Lender shall be solely responsible for any taxes required in connection with Producer's services.

## 13. INDEMNITY / GOVERNING LAW / VENUE

(a) Each party agrees to indemnify the other party from all damages, liabilities, costs and expenses arising out of any third party claim resulting from a breach of its warranties, representations or covenants herein, to the extent reduced to a final judgment or settled with the indemnifying party's prior written consent.

(b) Pending the determination of any claim subject to Lender's indemnity, Company may withhold from sums due Lender an amount equal to Lender's potential liability, released if no litigation has commenced within twelve (12) months.

(c) Any action arising hereunder shall be brought solely in the State Courts of the State of California, County of Los Angeles, and shall be governed by California law.

## 14. MISCELLANEOUS

(a) Nothing herein obligates Company to release any of the Master(s).

(b) No party will be in breach of this Agreement unless it fails to cure the breach within thirty (30) days after written notice (fifteen [15] days for failure to pay). Lender's sole remedy for any breach by Company shall be an action at law for damages.

(c) Company may assign its rights hereunder, remaining secondarily liable. Lender may not assign this Agreement without Company's consent, except for the right to receive payment.

(d) This Agreement supersedes all prior agreements on its subject matter and may be signed in counterparts, including by electronic means.

(e) EACH PARTY ACKNOWLEDGES THAT IT HAS READ THIS AGREEMENT AND HAS HAD THE UNRESTRICTED OPPORTUNITY TO BE REPRESENTED BY AN INDEPENDENT ATTORNEY OF ITS CHOICE.

**AGREED AND ACCEPTED:** "Company"

__________________________________________

Its: ${companySignTitle}

Printed Name: ${companySignName}

**AGREED AND ACCEPTED:** "Lender"

__________________________________________

Its: ${lenderSignTitle}

Printed Name: ${lenderSignName}

## INDUCEMENT

To induce ${artist} ("Company") to enter into the foregoing agreement ("Agreement") with ${producerCompany} ("Lender"), the undersigned hereby:

(a) acknowledges that the undersigned is familiar with all the terms and conditions of the Agreement;

(b) assents to the execution of the Agreement, agrees to be bound by its terms, and guarantees to Company the full performance of the Agreement by the undersigned and Lender; and

(c) acknowledges that Company shall be under no obligation to make any payments to the undersigned in connection with this inducement (except mechanical royalties and other publishing monies, if any).

**AGREED AND ACCEPTED:**

__________________________________________

${producer}"""

SCHEDULE_1 = """## SCHEDULE 1

**List of Master(s) and Composition(s), Ownership of Composition(s), and Credit(s)**

| Masters / Compositions | Ownership of Compositions (with Publishing Designees) | Credit |
|---|---|---|
| "${compositionTitle}" | ${writersAndSplits} | "Produced by ${producer}" |"""

SCHEDULE_2 = """## SCHEDULE 2

**Producer Royalty Provisions**

1. Producer's Royalty shall be paid retroactively from "record one" after Distributor recoups the Recording Costs (excluding the Advance) incurred in connection with the Masters at the "net artist" rate.
2. Producer's Royalty for records embodying the Master(s) together with other master recordings shall be pro-rated by the number of royalty-bearing Master(s) over the total number of royalty-bearing master recordings thereon.
3. On exploitations for which a percentage of net receipts is payable under the Recording Agreement, Producer's Royalty will equal that portion multiplied by a fraction, the numerator of which is the Base Rate and the denominator of which is the un-escalated "all-in" base royalty rate (the "Fraction").
4. Direct Monies received by Company or Artist from third parties (e.g., SoundExchange) solely attributable to the Master(s) shall be shared with Lender by the Fraction, and Company shall submit the letter of direction in the form of Exhibit C.
5. Producer's Royalty shall not be reduced by amounts payable to any third parties.
6. As used herein, "PPD" shall mean the so-called "royalty base price" set forth in the Recording Agreement.

**Accounting**

1. Company shall use reasonable efforts to cause Distributor to pay Lender directly via the letter of direction attached as Exhibit B. Otherwise Company shall send Lender statements within forty-five (45) days of Company's receipt of Distributor's statements.
2. Each statement shall be binding on Lender unless specific written objection is given within the period Artist may object under the Recording Agreement, less three (3) months."""

EXHIBIT_A = """## EXHIBIT A

**Recording Agreement Extracts**

[ATTACH RECORDING AGREEMENT EXTRACTS]"""

EXHIBIT_B = """## EXHIBIT B

**Letter of Direction**

${artist}

${companyAddress}

Dated as of: ${date}

Republic Records, a division of UMG Recordings, Inc., 1755 Broadway, New York, NY 10019

Re: Producer Agreement

To Whom It May Concern:

1. We have engaged ${producerCompany} ("Lender") to furnish the non-exclusive services of ${producer} ("Producer") as an independent contractor for the master recording(s) embodying the composition(s) entitled "${compositionTitle}" to be delivered to you pursuant to the distribution agreement between you and us.
2. We hereby irrevocably authorize you, solely as an accommodation to us, to account for and pay advances, fees and royalties to Lender on our behalf, and to credit Producer pursuant to the agreement attached hereto.
3. Your compliance with this authorization will constitute an accommodation to us alone, and all payments hereunder will constitute payment to us. We will indemnify you against any claims by reason of any such payment.

Very truly yours,

${artist}

By: _____________________ (An Authorized Signatory)"""

EXHIBIT_C = """## EXHIBIT C

**SOUNDEXCHANGE, INC. LETTER OF DIRECTION**

Solely as a service and accommodation to featured artists entitled to royalties under 17 U.S.C. § 114(g)(2)(D), SoundExchange permits such featured artists to designate that a percentage of their royalties be remitted to creative personnel (i.e., producers, mixers, or engineers) credited for the commercially released sound recording.

Fields marked with an asterisk (*) are required.

Name of Solo Artist(s) or Group on recording(s)*: ${artist}

Name of Producer, Mixer or Engineer ("Payee")*: ${producer}

Payee ID (if known): ${payeeId}

Payee Address*: ${payeeAddress}

Payee Telephone Number: ${payeePhone}

Payee Email*: ${payeeEmail}

Payment Percentage*: ${lodPaymentPercentage} of Performer royalties for all tracks listed on the LOD Repertoire Chart.

**TERMS AND CONDITIONS**

1. Performer represents that Performer is the featured recording artist on the sound recording(s) identified on the LOD Repertoire Chart (the "Recordings").
2. Performer represents that Payee is credited or recognized publicly for the Recordings as a producer, mixer or engineer.
3. Performer authorizes SoundExchange to pay Payee the Percentage of royalties otherwise payable to Performer in respect of the Recordings, and revokes any conflicting prior letter of direction.
4. SoundExchange will honor a written revocation by Performer of this designation and may discontinue payments hereunder at any time.
5. Royalties distributed to Payee are taxable to Payee, who shall provide any required tax paperwork.
6. This Letter of Direction shall be governed by the laws of the District of Columbia.

**ACKNOWLEDGED AND ACCEPTED BY:**

Performer Signature: ${performerSignature}

Performer Printed Legal Name*: ${performerPrintedName}

OR, SoundExchange Authorized LOD Signatory: ${authorizedSignatory}

SoundExchange Authorized LOD Signatory Printed Name: ${authorizedSignatoryPrintedName}

Date of Signature: ${signatureDate}

**ADDITIONAL SIGNATURES (use when applicable):**

Performer Signature: ${additionalPerformerSignature}

Performer Printed Legal Name*: ${additionalPerformerPrintedName}

OR, SoundExchange Authorized LOD Signatory: ${additionalAuthorizedSignatory}

SoundExchange Authorized LOD Signatory Printed Name: ${additionalAuthorizedSignatoryPrintedName}

Date of Signature: ${additionalSignatureDate}

**Repertoire Chart for Featured Artist Letter of Direction**

| Track Name | Percentage Share | Effective Date | Track Version | ISRC | Album or Release | Label | Release Date | Other Artists |
|---|---|---|---|---|---|---|---|---|
| ${lodTrackName} | ${lodPaymentPercentage} | ${lodEffectiveDate} | ${lodTrackVersion} | ${lodIsrc} | ${lodAlbum} | ${lodLabel} | ${lodReleaseDate} | ${lodOtherArtists} |"""
