from contract_templates.common import SIGNATURE_FOOTER

MANAGEMENT_BODY = """# PERSONAL MANAGEMENT AGREEMENT

**AGREEMENT** made and entered into as of this **${date}** between **${producer}** ("Manager") and **${artist}** ("Artist").

---

## RECITALS

**A.** Manager is a "personal manager" in the business of guiding and advising various artists in connection with their careers in the Entertainment Industry (as hereunder defined);

**B.** Artist is active as a singer, performer, songwriter, producer and otherwise in the Entertainment Industry; as used herein, the "Entertainment Industry" includes, without limitation, the fields of recording, writing, publishing, personal appearances and touring, producing, merchandising, motion pictures, television, radio, stage, endorsements, commercials, acting and performing, webcasting, and all other activities in any way connected with the entertainment industry and related fields;

**C.** Artist desires to obtain the counsel and advice of Manager in regard to Artist's career in the Entertainment Industry;

**NOW, THEREFORE**, in consideration of the mutual covenants and agreements contained herein, the parties agree as follows:

## 1. ENGAGEMENT

**1.1 Exclusive Engagement.** Artist hereby engages Manager as Artist's sole, exclusive and most senior ranking personal manager in the Entertainment Industry throughout the world during the Term (as hereinafter defined), and Manager hereby accepts such engagement subject to the terms and conditions set forth herein.

**1.2 Exclusivity.** Artist shall not engage any other person, firm or corporation to render the same or similar management services as Manager during the Term (it being understood that this prohibition shall not prevent Artist from engaging a Business Manager during the Term).

## 2. TERM

**2.1 Initial Period.** Subject to paragraphs 2.2 and 2.3 below, the term of this Agreement ("Term") shall be for an initial period of **${termYears}** years from the date hereof ("Initial Period").

**2.2 Option Period.** At the expiration of the Initial Period, Manager shall have the option to extend the Term for an additional one (1) year period (the "Option Period"). The Option Period shall be deemed automatically exercised unless Manager gives written notice to Artist terminating the Term prior to the expiration of the Initial Period.

**2.3 Term Continuation.** After expiration of the Initial Period or Option Period, the Term shall continue in force unless and until one party gives the other party thirty (30) days written notice of the termination of this Agreement.

## 3. SERVICES

**3.1 Advice and Counsel.** As and when reasonably requested by Artist, Manager shall advise and counsel Artist in all aspects of Artist's career including, without limitation:

- The selection of musical, artistic and literary material
- The selection of artists with whom Artist may write, record and perform
- Decisions on recording and publishing and third party agreements with respect to same
- Public relations and social media activity
- The adoption of proper formats for presentation of Artist's talents
- The selection of artistic talent to assist, accompany or embellish Artist's presentation
- Decisions on performing and touring
- The selection and engagement of a booking agent
- Terms upon which Artist shall render services to third parties
- General practices in the Entertainment Industry

**3.2 Availability.** Manager shall be reasonably available for scheduled conference calls and meetings at Artist's request.

**3.3 Referrals.** Artist agrees to promptly refer to Manager (and to instruct booking agents and all other parties to refer to Manager) all verbal and written leads, communications or requests in connection with all arrangements whereby Artist's name, likeness, voice, services or talents are utilized, for advice and counsel.

## 4. COMPENSATION

**4.1 Commission Rate.** Artist agrees to pay or cause to be paid "Commissions" to Manager in an amount equal to **${commissionRate}** (the "Commission Rate") of all Gross Monies (as hereinafter defined) earned and received by or on behalf of Artist during and after the Term which are derived from Term Product (as hereinafter defined).

**4.2 Term Product.** "Term Product" means solely the following activities, work or efforts of Artist in all fields of the Entertainment Industry:

- Any and all services rendered or substantially rendered, and works or products created or substantially created, prior to or during the Term
- Any and all live performances or tours performed during the Term or within six (6) months following the expiration of the Term if booked under a Term Agreement
- Endorsement or acting work or services rendered during the Term or within six (6) months of expiration of the Term under a Term Agreement

**4.3 Gross Monies.** "Gross Monies" means all forms of compensation (including, but not limited to, fees, salaries, earnings, advances, royalties, residuals, bonuses, proceeds of sales, leases or licenses, and shares of stock paid in lieu of compensation) directly or indirectly earned and received at any time by Artist, or by anyone on Artist's behalf, as a result of Artist's activities in and throughout the Entertainment Industry.

## 5. MANAGER'S OTHER BUSINESS

**5.1 Non-Exclusive Services.** Artist understands that Manager may also represent other persons and performers and that Manager's services hereunder are not exclusive, provided that Manager continues to perform Manager's obligations hereunder and acts in Artist's best interests.

## 6. ARTIST PUBLICITY

**6.1 Authorization.** Manager shall be authorized, with Artist's prior written approval (email or text shall suffice) in each instance, to approve and permit (i) publicity and advertising for Artist, and (ii) the use of Artist's name and previously approved likeness for the purposes of advertising and publicity (excluding any endorsements, merchandise or similar uses).

## 7. MANAGER EXPENSES

**7.1 Reimbursement.** Artist agrees to promptly reimburse Manager for all approved expenses, other than office overhead expenses, which Manager incurs on behalf of Artist in connection with the activities pursuant to this Agreement, provided that Manager has provided reasonably required substantiating documentation for such costs.

## 8. ACCOUNTINGS AND AUDIT RIGHTS

**8.1 Payment Schedule.** Artist shall account for and pay the Commissions to Manager within thirty (30) days after the close of each calendar month during the Term and for so long as Manager is entitled to receive Commissions under this Agreement.

## 9. NON-SOLICITATION

**9.1 Restriction.** Throughout the Term and for one (1) year thereafter, Artist shall not, without the express prior written consent of Manager, (i) recruit, solicit, hire or otherwise engage any person employed by or a client represented by Manager in the artist management business, or (ii) contact any such person for the purpose of inducing them to terminate their association with Manager.

## 10. POWER OF ATTORNEY

**10.1 Grant of Power.** Artist hereby appoints Manager as Artist's non-exclusive attorney-in-fact throughout the Term in the Entertainment Industry, solely to do the following:

- Engage, direct and discharge booking agencies and other third parties that seek to obtain engagements for Artist, provided that Artist approves each engagement in advance in writing (with email to constitute a writing for this purpose)
- Approve and permit the use of the names and approved likenesses of Artist, the voice of Artist and approved biographical material concerning Artist for advertising of and publicity for Artist and Artist's services

## 11. REPRESENTATIONS AND WARRANTIES

**11.1 Artist's Representations.** Artist represents and warrants that Artist has the right and authority to enter into and fully perform its obligations under this Agreement, and that Artist has not entered into any agreement inconsistent herewith.

**11.2 Manager's Representations.** Manager represents and warrants that Manager has the right and authority to enter into and fully perform its obligations under this Agreement, and that no act or omission by Manager in connection with Manager's services will violate any right of any person or subject Artist to any liability.

## 12. INDEMNIFICATION

**12.1 By Manager.** Manager shall indemnify, defend and hold Artist harmless from and against any and all claims, losses, damages, liabilities, costs and expenses (including reasonable attorneys' fees) arising out of any third party claim which (i) arises out of any breach by Manager of this Agreement, or (ii) results from the actions, omissions or negligence of Manager.

**12.2 By Artist.** Artist shall indemnify, defend and hold Manager harmless from and against any and all claims, losses, damages, liabilities, costs and expenses (including reasonable attorneys' fees) arising out of any third party claim which (i) arises out of any breach by Artist of this Agreement, or (ii) results from the actions, omissions or negligence of Artist.

## 13. ASSIGNMENT

**13.1 Manager.** Manager shall have the right to assign this Agreement, in whole or in part, to any subsidiary, parent company, affiliate, or to any third party acquiring all or substantially all of its assets or stock.

**13.2 Artist.** Artist shall not have the right to assign this Agreement without Manager's prior written consent, other than to a company wholly owned by Artist.

## 14. DISPUTE RESOLUTION

**14.1 Early Resolution.** The parties will negotiate in good faith for a period of at least thirty (30) days to attempt to resolve any dispute arising out of or relating to this Agreement, and if the matter is not so resolved, either party may submit such matter to JAMS for final and binding arbitration pursuant to paragraph 14.2 below.

**14.2 JAMS.** Either party may initiate arbitration by filing with JAMS a written demand for arbitration, which shall be determined by arbitration in the City of Los Angeles, State of California.

## 15. INDEPENDENT COUNSEL

**15.1 Legal Representation.** The parties warrant that in executing this Agreement they have relied solely upon their own judgment and the advice of their own independently selected counsel, and have not been influenced by any representations made by any other party.

## 16. NOTICES

**16.1 Notice Requirements.** Any notice required to be given hereunder shall be in writing and shall be deemed given if sent by pre-paid first class post, email or by hand or courier to the address of the addressee set forth below, or such other address as the addressee may from time to time notify in writing.

## 17. MISCELLANEOUS

**17.1 Breach.** Neither party shall be deemed in breach of this Agreement unless the other party gives written notice of such failure to perform and such failure (if curable) is not corrected within thirty (30) days after receipt of such notice.

**17.2 Confidentiality.** The parties agree not to disclose the terms of this Agreement to any other party without the prior written consent of the other party, except as required by law or to professional advisers.

**17.3 Entire Agreement.** This Agreement represents the sole understanding of the parties with regard to its subject matter, and no amendment shall be valid unless in writing and signed on behalf of both parties.

**17.4 Governing Law.** This Agreement shall be governed by and construed in accordance with the laws of the State of California applicable to contracts entered into and performed entirely within that State.

""" + SIGNATURE_FOOTER + """

---

**MANAGER ADDRESS:**

${producerAddress}

**Contact:** ${producerContact}

**Email:** ${producerEmail}

**Phone:** ${producerPhone}

**ARTIST ADDRESS:**

${artistAddress}

**Contact:** ${artistContact}

**Email:** ${artistEmail}

**Phone:** ${artistPhone}"""
